from .instructions import Instruction, InstructionKind, build_instructions
from .templates import render_instruction
from .writer import PatternWriter, TemplateWriter, WriterInput, WriterOutput

__all__ = [
    "Instruction",
    "InstructionKind",
    "build_instructions",
    "render_instruction",
    "PatternWriter",
    "TemplateWriter",
    "WriterInput",
    "WriterOutput",
]
