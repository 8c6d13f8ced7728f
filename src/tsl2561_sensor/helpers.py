from collections.abc import Callable
from typing import Any

from .reader import TSL2561Reader


def make_tsl2561_read_sample(reader: TSL2561Reader) -> Callable[[], dict[str, Any]]:
    def read_sample() -> dict[str, Any]:
        s = reader.read()
        return {
            "ambient_lux": s.ambient_lux,
            "ch0": s.ch0,
            "ch1": s.ch1,
        }

    return read_sample
