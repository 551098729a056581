"""schemas — frozen value objects shared by the compiler stages."""

from ruler.schemas.scale import ScaleConfig, ScaleEntry, SizePair
from ruler.schemas.utility import GeneratedRule, UtilityConfig

__all__ = ["SizePair", "ScaleConfig", "ScaleEntry", "UtilityConfig", "GeneratedRule"]
