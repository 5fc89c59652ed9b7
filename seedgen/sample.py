"""Config-driven sampling report, fully driven by the seed."""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Optional

from .combinators import char, string
from .distribution import boolean, sized, uniform
from .errors import ValidationError
from .gen import Gen
from .models import State
from .numbers import decimal, integer, make_skew, negative, number, positive

logger = logging.getLogger(__name__)


@dataclass
class SampleConfig:
    """Configuration for one sampling run."""

    seed: int = 1357954837
    size: int = 10
    kind: str = "integer"
    min: Optional[float] = None  # generator default when unset
    max: Optional[float] = None
    bias: Optional[float] = None
    influence: Optional[float] = None
    distribution: tuple[float, ...] = ()
    unchecked: bool = False


def _bounds(cfg: SampleConfig) -> Dict[str, Any]:
    bounds: Dict[str, Any] = {}
    if cfg.min is not None:
        bounds["min"] = cfg.min
    if cfg.max is not None:
        bounds["max"] = cfg.max
    return bounds


def _numeric(factory: Callable[..., Gen[Any]]) -> Callable[[SampleConfig], Gen[Any]]:
    def build(cfg: SampleConfig) -> Gen[Any]:
        skew = make_skew(cfg.bias, cfg.influence)
        return factory(skew=skew, unchecked=cfg.unchecked, **_bounds(cfg))

    return build


def _index_size(cfg: SampleConfig) -> int:
    if cfg.distribution and cfg.max is None:
        return len(cfg.distribution)
    if cfg.max is None:
        raise ValidationError(f"Kind '{cfg.kind}' needs a max size")
    return int(cfg.max)


def _char(cfg: SampleConfig) -> Gen[Any]:
    if _bounds(cfg):
        raise ValidationError("Kind 'char' draws from the printable range and takes no min or max")
    return char()


def _string(cfg: SampleConfig) -> Gen[Any]:
    bounds = {key: int(value) for key, value in _bounds(cfg).items()}
    return string(**bounds)


BUILDERS: Dict[str, Callable[[SampleConfig], Gen[Any]]] = {
    "decimal": lambda cfg: decimal,
    "positive": _numeric(positive),
    "negative": _numeric(negative),
    "integer": _numeric(integer),
    "number": _numeric(number),
    "uniform": lambda cfg: uniform(_index_size(cfg)),
    "sized": lambda cfg: sized(_index_size(cfg), cfg.distribution or None),
    "boolean": lambda cfg: boolean,
    "char": _char,
    "string": _string,
}


def build_generator(cfg: SampleConfig) -> Gen[Any]:
    try:
        builder = BUILDERS[cfg.kind]
    except KeyError:
        raise ValidationError(
            f"Unknown kind '{cfg.kind}'. Expected one of: {', '.join(sorted(BUILDERS))}"
        ) from None
    return builder(cfg)


def run_sample(cfg: SampleConfig) -> Dict[str, Any]:
    """Draw `cfg.size` values of `cfg.kind` starting from `cfg.seed`."""
    if cfg.size < 0:
        raise ValidationError(f"Sample size of {cfg.size} should not be less than 0")

    generator = build_generator(cfg)
    logger.debug("sampling %d %s values from seed %#x", cfg.size, cfg.kind, cfg.seed)
    values = generator.range(State(seed=cfg.seed), cfg.size)

    return {
        "config": asdict(cfg),
        "values": values,
    }


if __name__ == "__main__":
    import json

    result = run_sample(SampleConfig())
    print(json.dumps(result, indent=2))
