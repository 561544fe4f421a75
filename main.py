import argparse
import logging
import os
import sys
from typing import List, Optional

# Compatibility settings
os.environ["TRIMESH_NO_EMBREE"] = "1"   # trimesh speed/compatibility

from core.config import (
    DEFAULT_JOBS,
    EXIT_FILE_ERROR,
    EXIT_GEOMETRY_ERROR,
    EXIT_MESH_ERROR,
    EXIT_OK,
    EXIT_USAGE_ERROR,
    REPORT_PRECISION,
)
from core.errors import DegenerateNormalError, FileAccessError, IntersectorFailure, InvalidMeshError
from core.logging_config import setup_logging
from core.use_cases import ComputeSectionsUseCase, ExportSectionsUseCase, LoadModelUseCase, ReadPlanesUseCase
from adapters.centreline_reader import CentrelineReader
from adapters.model_loader_adapter import TrimeshModelLoaderAdapter
from adapters.section_adapter import TrimeshSectionAdapter
from adapters.txt_exporter import TxtExporter
from workers.section_worker import SectionWorker

logger = logging.getLogger("mesh_slicer")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="mesh-slicer",
        description="Slice a closed triangle mesh along a centreline and report signed cross-section areas.",
    )
    ap.add_argument("mesh", help="Closed triangle mesh (.off, .stl, .obj, ...)")
    ap.add_argument("centreline", help="Plane list: N, then N rows of 'Ox Oy Oz Nx Ny Nz'")
    ap.add_argument("outfile", help="Report file to write")
    ap.add_argument("-j", "--jobs", type=int, default=DEFAULT_JOBS, help="Worker processes for slicing")
    ap.add_argument("--precision", type=int, default=REPORT_PRECISION, help="Significant digits in the report")
    ap.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console/file log level",
    )
    ap.add_argument("--log-file", default=None, help="Also write the log to this file")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Usage
      $ mesh-slicer mesh_file.off centreline.txt outfile.txt
    returns 0 on success, 1 on file error, 2 on mesh error, 3 on geometry error,
    4 on a bad command line (argparse would otherwise exit 2, the mesh error code)
    """
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as e:
        # --help exits 0
        return EXIT_OK if e.code in (0, None) else EXIT_USAGE_ERROR
    setup_logging(getattr(logging, args.log_level), args.log_file)

    sectioner = TrimeshSectionAdapter()
    uc_load = LoadModelUseCase(TrimeshModelLoaderAdapter())
    uc_planes = ReadPlanesUseCase(CentrelineReader())
    uc_section = ComputeSectionsUseCase(SectionWorker(sectioner, processes=args.jobs))
    uc_export = ExportSectionsUseCase(TxtExporter(precision=args.precision))

    try:
        mesh = uc_load(args.mesh)
        planes = uc_planes(args.centreline)
        sections = uc_section(mesh, planes)
        uc_export(sections, args.outfile)
    except FileAccessError as e:
        logger.error(str(e))
        return EXIT_FILE_ERROR
    except InvalidMeshError as e:
        logger.error(str(e))
        return EXIT_MESH_ERROR
    except (DegenerateNormalError, IntersectorFailure) as e:
        logger.error(str(e))
        return EXIT_GEOMETRY_ERROR

    logger.info("Done!")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
