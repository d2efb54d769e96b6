from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from bloom import const
from bloom.api.frame_data import PointSet
from bloom.geometry.generator import generate_curve_control_points, generate_radial_endpoints


@dataclass
class MorphPair:
    """Current and target end of one linear interpolation."""
    current: PointSet
    target: PointSet

    def advance(self, fresh: PointSet) -> None:
        self.current = self.target
        self.target = fresh


@dataclass
class CurveFamily:
    segment_count: int
    # name of the ParameterStore field holding this family's colour
    color_param: str
    pair: MorphPair


@dataclass
class GeometryState:
    radial: MorphPair
    families: List[CurveFamily] = field(default_factory=list)

    @classmethod
    def create(cls, width: float, height: float,
               rng: Optional[random.Random] = None,
               families: Sequence[Tuple[int, str]] = const.CURVE_FAMILIES) -> "GeometryState":
        radial = MorphPair(
            current=generate_radial_endpoints(width, height, rng),
            target=generate_radial_endpoints(width, height, rng),
        )
        curves = []
        for segment_count, color_param in families:
            curves.append(CurveFamily(
                segment_count=segment_count,
                color_param=color_param,
                pair=MorphPair(
                    current=generate_curve_control_points(width, height, segment_count, rng),
                    target=generate_curve_control_points(width, height, segment_count, rng),
                ),
            ))
        return cls(radial=radial, families=curves)

    def promote(self, width: float, height: float, rng: Optional[random.Random] = None) -> None:
        """Targets become current; fresh targets are generated for the given viewport."""
        self.radial.advance(generate_radial_endpoints(width, height, rng))
        for fam in self.families:
            fam.pair.advance(generate_curve_control_points(
                width, height, fam.segment_count, rng))
