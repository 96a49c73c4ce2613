from .converter import convert_round, convert_rounds, equator_stitch_count

__all__ = ["convert_round", "convert_rounds", "equator_stitch_count"]
