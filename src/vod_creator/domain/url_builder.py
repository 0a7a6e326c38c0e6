"""Resolves locator path templates into playable URLs."""

from .models import StreamingPaths


class StreamingUrlBuilder:
    """Prefixes locator paths with a streaming endpoint host."""

    def build(self, host_name: str, paths: StreamingPaths) -> tuple[list[str], list[str]]:
        """
        Builds streaming and download URLs for a streaming endpoint host.

        Streaming paths are flattened in iteration order. Nothing is sorted
        or deduplicated.

        Args:
            host_name: Host name of the streaming endpoint.
            paths: Path templates returned for a streaming locator.

        Returns:
            Tuple of (streaming_urls, download_urls).
        """
        streaming_urls = [
            self._resolve(host_name, path)
            for streaming_path in paths.streaming_paths
            for path in streaming_path
        ]
        download_urls = [
            self._resolve(host_name, path) for path in paths.download_paths
        ]
        return streaming_urls, download_urls

    def _resolve(self, host_name: str, path: str) -> str:
        return f"https://{host_name}{path}"
