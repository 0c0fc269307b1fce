class ScorelineError(Exception):
    """Base exception for Scoreline errors."""
    pass

class ConfigError(ScorelineError):
    """Configuration loading specific errors."""
    pass

class DataSourceError(ScorelineError):
    """Score payload specific errors (bad envelopes, failed upstream responses)."""
    pass
