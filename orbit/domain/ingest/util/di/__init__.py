from orbit.domain.ingest.util.di.provider import IngestProvider

__all__ = ["IngestProvider"]
