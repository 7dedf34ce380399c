"""htmlbuilder compiler - groups scanned lines and assembles node trees."""

from htmlbuilder.compiler.assembler import assemble
from htmlbuilder.compiler.compiler import Compiler, compile_template
from htmlbuilder.compiler.segmenter import segment

__all__ = ["Compiler", "compile_template", "assemble", "segment"]
