"""Template library assembly pipeline."""

from template_library.pipelines.assembly.pipeline import AssemblyPipeline

__all__ = ["AssemblyPipeline"]
