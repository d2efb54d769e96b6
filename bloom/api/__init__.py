from .frame_data import FrameData, Point, PointSet
from .config import EngineConfig
from .params import ParameterStore, ParamSpec, PARAM_SPECS

__all__ = ["FrameData", "Point", "PointSet", "EngineConfig",
           "ParameterStore", "ParamSpec", "PARAM_SPECS"]
