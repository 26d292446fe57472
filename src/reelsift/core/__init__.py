"""Core orchestration — Engine, cache-aside lookup, and fan-out search."""
