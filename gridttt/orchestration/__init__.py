from .loop import GameLoop, SeriesResult, ai_count_bounds, validate_player_counts

__all__ = ["GameLoop", "SeriesResult", "ai_count_bounds", "validate_player_counts"]
