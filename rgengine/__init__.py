"""Engine utilities, shader source preprocessing and a shader reflection header generator."""

__version__ = "0.1.0"
__all__ = [
    "base_id",
    "file_utils",
    "hashing",
    "logs",
    "resource_bind",
    "shader_preprocess",
    "shadergen",
    "strid",
    "timer",
]