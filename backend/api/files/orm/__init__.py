from api.files.orm.file_model import FileModel, FileStatus, FileType

__all__ = ["FileModel", "FileStatus", "FileType"]
