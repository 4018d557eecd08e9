import dataclasses
import enum


class ErrorVolume(enum.Enum):
    """
    How loudly to complain about something
    """
    ERROR = 'error'
    WARNING = 'warning'
    SILENT = 'silent'

    @classmethod
    def default(cls):
        return cls.WARNING


@dataclasses.dataclass
class DemangleFailureHandling:
    """
    What to do when a symbol can't be demangled
    """
    class Behavior(enum.Enum):
        KEEP = 'keep'  # use the mangled name as-is
        DROP = 'drop'  # return None

    volume: ErrorVolume = dataclasses.field(default_factory=ErrorVolume.default)
    behavior: Behavior = Behavior.KEEP
