from orbit.domain.ingest.port.fetcher import PageFetcher

__all__ = ["PageFetcher"]
