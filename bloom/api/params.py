from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from bloom import const


@dataclass(frozen=True)
class ParamSpec:
    """
    Describes how a control panel binds to one ParameterStore field.
    kind is "number" or "color"; min/max/step only apply to numbers.
    """
    name: str
    kind: str
    label: str
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None

    def snap(self, value: float) -> float:
        """Clamp to [min, max] and round to the nearest step (UI-side only)."""
        lo, hi = float(self.min), float(self.max)
        value = max(lo, min(hi, float(value)))
        if self.step:
            value = lo + round((value - lo) / self.step) * self.step
            value = max(lo, min(hi, value))
        return value


PARAM_SPECS: Tuple[ParamSpec, ...] = (
    ParamSpec("repeat_count", "number", "complexity", *const.REPEAT_COUNT_RANGE),
    ParamSpec("amplitude", "number", "amplitude", *const.AMPLITUDE_RANGE),
    ParamSpec("color1", "color", "color1"),
    ParamSpec("color2", "color", "color2"),
    ParamSpec("color3", "color", "color3"),
)


@dataclass
class ParameterStore:
    """
    Live user-tunable values. The renderer reads these every frame, so a
    write shows up on the next frame. Range checks are the panel's job;
    programmatic writes are stored as given.
    """
    repeat_count: int = const.DEFAULT_REPEAT_COUNT
    amplitude: float = const.DEFAULT_AMPLITUDE
    color1: Any = const.DEFAULT_COLOR1
    color2: Any = const.DEFAULT_COLOR2
    color3: Any = const.DEFAULT_COLOR3

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "ParameterStore":
        store = cls()
        store.update(values or {})
        return store

    def get(self, name: str) -> Any:
        if name not in self.names():
            raise KeyError(f"Unknown parameter: {name}")
        return getattr(self, name)

    def set(self, name: str, value: Any) -> None:
        if name not in self.names():
            raise KeyError(f"Unknown parameter: {name}")
        if name == "repeat_count":
            value = int(value)
        elif name == "amplitude":
            value = float(value)
        setattr(self, name, value)

    def update(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            self.set(name, value)

    def specs(self) -> Iterator[ParamSpec]:
        return iter(PARAM_SPECS)

    def as_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.names()}
