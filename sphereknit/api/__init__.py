from .generate import convert_spec, generate_pattern

__all__ = ["convert_spec", "generate_pattern"]
