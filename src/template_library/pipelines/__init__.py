"""Processing pipelines for the template library assembler."""

from template_library.pipelines.assembly import AssemblyPipeline

__all__ = ["AssemblyPipeline"]
