"""Code generation exports."""

from .javascript_codegen import CodegenError, JavaScriptCodegen, generate_javascript

__all__ = ["CodegenError", "JavaScriptCodegen", "generate_javascript"]
