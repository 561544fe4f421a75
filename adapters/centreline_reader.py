# adapters/centreline_reader.py
import logging
from pathlib import Path
from typing import List

from core.errors import FileAccessError, PlaneListFormatError
from core.models import Plane
from core.ports import PlaneReaderPort

logger = logging.getLogger(__name__)


class CentrelineReader(PlaneReaderPort):
    """
    Reads a count N followed by N rows of [Ox Oy Oz Nx Ny Nz].
    Tokens may be split over lines in any way.
    """

    def read_planes(self, file_path: str) -> List[Plane]:
        path = Path(file_path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(f"Invalid centreline file: {path} ({e})") from e
        return self.parse(text, source=str(path))

    @staticmethod
    def parse(text: str, source: str = "<string>") -> List[Plane]:
        tokens = text.split()
        if not tokens:
            raise PlaneListFormatError(f"{source}: empty centreline file")
        try:
            count = int(tokens[0])
        except ValueError as e:
            raise PlaneListFormatError(f"{source}: plane count '{tokens[0]}' is not an integer") from e
        if count < 0:
            raise PlaneListFormatError(f"{source}: negative plane count {count}")

        values = tokens[1:]
        if len(values) < 6 * count:
            raise PlaneListFormatError(
                f"{source}: expected {6 * count} values for {count} plane(s), found {len(values)}"
            )
        if len(values) > 6 * count:
            logger.warning(f"{source}: ignoring {len(values) - 6 * count} trailing value(s)")

        try:
            reals = [float(v) for v in values[:6 * count]]
        except ValueError as e:
            raise PlaneListFormatError(f"{source}: {e}") from e

        planes = [Plane.from_values(*reals[6 * t:6 * t + 6]) for t in range(count)]
        logger.info(f"     Plane count: {len(planes)}")
        return planes
