"""
Cosmology Configuration for cosmodist
=====================================

Named parameter presets and YAML (de)serialization of cosmology models.

A configuration is a flat mapping naming the model and its parameters::

    model: LambdaCDM
    H0: 70.0
    Om0: 0.3
    Ol0: 0.7

Unknown keys are reported with a warning and ignored.
"""

import dataclasses
import warnings
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..models import FlatLCDM, LambdaCDM, WCDM, WACDM
from .base import FLRW

MODELS = {
    'flatlcdm': FlatLCDM,
    'lambdacdm': LambdaCDM,
    'wcdm': WCDM,
    'wacdm': WACDM,
}

# Best-fit parameter sets
PRESETS: Dict[str, Dict[str, Any]] = {
    'planck2018': {'model': 'FlatLCDM', 'H0': 67.36, 'Om0': 0.3153},
    'wmap9': {'model': 'FlatLCDM', 'H0': 70.0, 'Om0': 0.279},
    'concordance': {'model': 'LambdaCDM', 'H0': 70.0, 'Om0': 0.3, 'Ol0': 0.7},
}


def _model_class(name: str):
    try:
        return MODELS[name.lower()]
    except KeyError:
        valid = [cls.__name__ for cls in MODELS.values()]
        raise ValueError(f"Unknown cosmology model '{name}'. Valid models: {valid}") from None


def cosmology_from_dict(config: Dict[str, Any]) -> FLRW:
    """
    Build a cosmology model from a configuration mapping.

    Parameters
    ----------
    config : dict
        Must contain 'model' and the model's required parameters
        ('H0', 'Om0', and 'Ol0' for all but FlatLCDM)

    Returns
    -------
    FLRW
        Model instance

    Raises
    ------
    ValueError
        Unknown model name or missing required parameter
    """
    params = dict(config)
    if 'model' not in params:
        raise ValueError("Cosmology configuration must specify 'model'")
    cls = _model_class(str(params.pop('model')))

    fields = {f.name: f for f in dataclasses.fields(cls)}
    for name in [key for key in params if key not in fields]:
        warnings.warn(f"Unknown parameter '{name}' for {cls.__name__}. Ignoring it.")
        params.pop(name)

    missing = [name for name, f in fields.items()
               if f.default is dataclasses.MISSING and name not in params]
    if missing:
        raise ValueError(f"Missing required parameters for {cls.__name__}: {missing}")

    return cls(**{name: float(value) for name, value in params.items()})


def cosmology_to_dict(cosmo: FLRW) -> Dict[str, Any]:
    """Configuration mapping of ``cosmo``, inverse of ``cosmology_from_dict``."""
    config = {'model': type(cosmo).__name__}
    config.update(dataclasses.asdict(cosmo))
    return config


def preset(name: str, **overrides) -> FLRW:
    """
    Cosmology from a named preset.

    Parameters
    ----------
    name : str
        One of ``PRESETS``
    **overrides
        Override any preset parameter (including 'model')
    """
    try:
        config = dict(PRESETS[name.lower()])
    except KeyError:
        raise ValueError(f"Unknown preset '{name}'. Valid presets: {list(PRESETS)}") from None
    config.update(overrides)
    return cosmology_from_dict(config)


def load_cosmology(filename: Union[str, Path]) -> FLRW:
    """
    Load a cosmology from a YAML file.

    A file holding ``preset: <name>`` (optionally with overrides) starts
    from that preset.
    """
    with open(filename, 'r') as f:
        config = yaml.safe_load(f) or {}

    if 'preset' in config:
        name = config.pop('preset')
        return preset(name, **config)
    return cosmology_from_dict(config)


def save_cosmology(cosmo: FLRW, filename: Union[str, Path]) -> None:
    """Save a cosmology to a YAML file."""
    with open(filename, 'w') as f:
        yaml.dump(cosmology_to_dict(cosmo), f, default_flow_style=False, sort_keys=False)
