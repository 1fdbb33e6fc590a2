from dataclasses import dataclass


@dataclass
class CorrelationConfig:
    capacity: int = 20      # Number of (x, y) slots, fixed for the engine's lifetime
    running: bool = False   # Overwrite oldest sample when full instead of rejecting
    r2: bool = True         # Keep R / R^2 up to date
    e2: bool = True         # Keep the residual sum of squares up to date


def config_from_args(args) -> CorrelationConfig:
    """Map parsed command-line flags (see main.py) onto a CorrelationConfig."""
    return CorrelationConfig(
        capacity=args.capacity,
        running=getattr(args, "running", False),
        r2=not getattr(args, "no_r2", False),
        e2=not getattr(args, "no_e2", False),
    )
