"""
FoodSnap enhancement engine
Angle-aware food photo prompts, style validation, editing and publishing
"""
from foodsnap.services.enhancement_engine import EnhancementEngine, create_engine

__all__ = ["EnhancementEngine", "create_engine"]
