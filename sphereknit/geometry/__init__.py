from .sampler import hemisphere_round_count, round_count_for, sample_rounds, segment_arc_length

__all__ = ["hemisphere_round_count", "round_count_for", "sample_rounds", "segment_arc_length"]
