"""Exception hierarchy used throughout the application."""

from __future__ import annotations


class AppError(Exception):
    """Base class of every error the application raises."""

    prefix = ""

    def __init__(self, detail: object = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}{self.detail}"


class FileOperationError(AppError):
    """A file could not be read or written."""

    prefix = "文件操作错误: "


class NetworkError(AppError):
    """A network request failed."""

    prefix = "网络请求错误: "


class UrlParseError(AppError):
    """A URL could not be parsed."""

    prefix = "URL 解析错误: "


class JsonError(AppError):
    """JSON could not be encoded or decoded."""

    prefix = "JSON 错误: "


class RegexError(AppError):
    """A regular expression was invalid."""

    prefix = "正则表达式错误: "


class ImageError(AppError):
    """An image could not be processed."""

    prefix = "图像处理错误: "


class CustomError(AppError):
    """An error carrying a free-form message."""


class MissingFileError(AppError):
    """A required file does not exist."""

    prefix = "文件未找到: "