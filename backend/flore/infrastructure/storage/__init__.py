from .json_file_backend import JsonFileBackend

__all__ = ["JsonFileBackend"]
