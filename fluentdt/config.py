from .week_rule import WeekNumbering, WeekRule

class FluentConfig:
    """
    Library-wide defaults for week calculations.
    Use set(), reset(), and get_config() to manage options.
    """
    _defaults = {
        "week_rule": WeekRule.ISO_8601,                # used when a call passes rule=None
        "numbering": WeekNumbering.INTERNATIONAL,
        "verbosity": 1,                                 # Default: normal verbosity
    }
    week_rule = _defaults["week_rule"]
    numbering = _defaults["numbering"]
    verbosity = _defaults["verbosity"]

    @classmethod
    def set(cls, **kwargs):
        """Set one or more config options."""
        for k, v in kwargs.items():
            if k in cls._defaults:
                setattr(cls, k, v)

    @classmethod
    def reset(cls):
        """Reset all config options to their default values."""
        for k, v in cls._defaults.items():
            setattr(cls, k, v)

    @classmethod
    def get_config(cls):
        """Return a dict of current config values."""
        return {k: getattr(cls, k) for k in cls._defaults}

def set_config(**kwargs):
    """Convenience function to set config options."""
    FluentConfig.set(**kwargs)
