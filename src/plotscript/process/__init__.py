from .sink import InstructionBuffer, InstructionSink

__all__ = ["InstructionBuffer", "InstructionSink"]
