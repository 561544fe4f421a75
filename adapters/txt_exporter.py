# adapters/txt_exporter.py
import csv
from typing import Sequence

from core.config import REPORT_PRECISION
from core.errors import FileAccessError
from core.models import CrossSection
from core.ports import SectionExporterPort


class TxtExporter(SectionExporterPort):
    def __init__(self, precision: int = REPORT_PRECISION):
        self.precision = precision

    def _fmt(self, v: float) -> str:
        return f"{float(v):.{self.precision}g}"

    def export_txt(self, sections: Sequence[CrossSection], file_path: str) -> None:
        try:
            with open(file_path, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f, delimiter=" ", lineterminator="\n")
                writer.writerow([len(sections)])
                for section in sections:
                    writer.writerow([section.loop_count])
                    for loop in section.loops:
                        writer.writerow([self._fmt(loop.area)])
                        writer.writerow([loop.vertex_count])
                        for p in loop.polyline:
                            writer.writerow([self._fmt(p[0]), self._fmt(p[1]), self._fmt(p[2])])
        except OSError as e:
            raise FileAccessError(f"Invalid output file: {file_path} ({e})") from e
