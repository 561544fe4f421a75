# core/use_cases.py
import logging
from typing import Any, List, Sequence

from .models import CrossSection, Plane
from .pipeline import CrossSectionPipeline
from .ports import ModelLoaderPort, PlaneReaderPort, SectionComputerPort, SectionExporterPort

logger = logging.getLogger(__name__)


class LoadModelUseCase:
    def __init__(self, loader: ModelLoaderPort):
        self.loader = loader

    def __call__(self, file_path: str) -> Any:
        logger.info("Reading mesh ...")
        return self.loader.load(file_path)


class ReadPlanesUseCase:
    def __init__(self, reader: PlaneReaderPort):
        self.reader = reader

    def __call__(self, file_path: str) -> List[Plane]:
        logger.info("Reading centreline ...")
        return self.reader.read_planes(file_path)


class ComputeSectionsUseCase:
    """Runs a CrossSectionPipeline, or any runner with the same run(mesh, planes) signature."""

    def __init__(self, runner):
        self.runner = runner

    @classmethod
    def sequential(cls, sectioner: SectionComputerPort) -> "ComputeSectionsUseCase":
        return cls(CrossSectionPipeline(sectioner))

    def __call__(self, mesh: Any, planes: Sequence[Plane]) -> List[CrossSection]:
        sections = self.runner.run(mesh, planes)
        n_warn = sum(len(s.warnings) for s in sections)
        if n_warn:
            logger.warning(f"{n_warn} non-simple loop(s); their areas may not be well-defined")
        return sections


class ExportSectionsUseCase:
    def __init__(self, exporter: SectionExporterPort):
        self.exporter = exporter

    def __call__(self, sections: Sequence[CrossSection], file_path: str) -> None:
        self.exporter.export_txt(sections, file_path)
        logger.info(f"Report written: {file_path}")
