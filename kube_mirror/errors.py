class ImageMirrorError(Exception):
    pass


class VersionFormatError(ImageMirrorError, ValueError):
    pass


class EngineUnavailableError(ImageMirrorError, EnvironmentError):
    pass


class ResolutionError(ImageMirrorError, RuntimeError):
    pass


class CommandError(ImageMirrorError, RuntimeError):
    def __init__(self, command: list[str], returncode: int | None, output: str = ""):
        self.command: list[str] = command
        self.returncode: int | None = returncode
        self.output: str = output
        super().__init__(f"Command '{' '.join(command)}' failed with code {returncode}: {output.strip()}")


class FetchError(ImageMirrorError, RuntimeError):
    def __init__(self, url: str, message: str, status_code: int | None = None):
        self.url: str = url
        self.status_code: int | None = status_code
        super().__init__(f"Failed to fetch {url}: {message}")
