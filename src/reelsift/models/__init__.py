"""Entity record and search result models."""

from reelsift.models.actor import ActorInfo, ActorSearchResult
from reelsift.models.movie import MovieInfo, MovieSearchResult
from reelsift.models.record import Record

__all__ = ["ActorInfo", "ActorSearchResult", "MovieInfo", "MovieSearchResult", "Record"]
