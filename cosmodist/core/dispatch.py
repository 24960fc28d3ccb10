"""
Method Selection by Parameter Regime
====================================

Each cosmology picks, per quantity, the cheapest method that is exact for
its parameters. The choice is a pure function of the parameter set, written
as an ordered decision table: the first row whose condition holds wins, and
numerical quadrature is the fallback.

Analytic and elliptic rows only apply to radiation-free models; delegation
rows hand the computation to a simpler model with the same parameters.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence


class Method(Enum):
    """Computation strategies a model can dispatch to."""
    ELLIPTIC = "elliptic"
    FLAT_ANALYTIC = "flat_analytic"
    EINSTEIN_DE_SITTER = "einstein_de_sitter"
    MATTER_CURVATURE = "matter_curvature"
    DARK_ENERGY_CURVATURE = "dark_energy_curvature"
    FLAT_LCDM = "flat_lcdm"
    LAMBDA_CDM = "lambda_cdm"
    WCDM = "wcdm"
    QUADRATURE = "quadrature"


@dataclass(frozen=True)
class Rule:
    """One row of a decision table: condition -> method."""
    method: Method
    condition: Callable[[Any], bool]
    description: str = ""


def select_method(rules: Sequence[Rule], cosmo: Any) -> Method:
    """
    First method in ``rules`` whose condition holds for ``cosmo``.

    Parameters
    ----------
    rules : sequence of Rule
        Decision table, evaluated in order
    cosmo : FLRW
        Model instance whose parameters are inspected

    Returns
    -------
    Method
        Selected strategy, ``Method.QUADRATURE`` if no row matches
    """
    for rule in rules:
        if rule.condition(cosmo):
            return rule.method
    return Method.QUADRATURE


# ==================== Conditions ====================

def _radiation_free(c) -> bool:
    return c.Ogamma0 + c.Onu0 == 0


def _flat_sub_critical(c) -> bool:
    return c.Ok0 == 0 and c.Om0 < 1


def _no_dark_energy(c) -> bool:
    return _radiation_free(c) and c.Ol0 == 0


def _open_or_closed_matter(c) -> bool:
    return _no_dark_energy(c) and 0 < c.Om0 and c.Om0 != 1


def _einstein_de_sitter(c) -> bool:
    return _no_dark_energy(c) and c.Om0 == 1


def _dark_energy_only(c) -> bool:
    return _radiation_free(c) and c.Om0 == 0 and 0 < c.Ol0 < 1


# ==================== Decision Tables ====================

FLAT_LCDM_DISTANCE_RULES = (
    Rule(Method.ELLIPTIC, lambda c: _radiation_free(c) and 0 < c.Om0 < 1,
         "matter + Λ: Carlson R_F"),
    Rule(Method.MATTER_CURVATURE, _einstein_de_sitter,
         "Einstein-de Sitter: Mattig formula"),
)

FLAT_LCDM_TIME_RULES = (
    Rule(Method.EINSTEIN_DE_SITTER, _einstein_de_sitter,
         "Einstein-de Sitter power law"),
    Rule(Method.FLAT_ANALYTIC, lambda c: _radiation_free(c) and 0 < c.Om0 < 1,
         "matter + Λ: asinh closed form"),
)

LAMBDA_CDM_DISTANCE_RULES = (
    Rule(Method.FLAT_LCDM, _flat_sub_critical, "flat: delegate to FlatLCDM"),
    Rule(Method.MATTER_CURVATURE, _no_dark_energy, "matter + curvature"),
)

LAMBDA_CDM_TIME_RULES = (
    Rule(Method.FLAT_LCDM, _flat_sub_critical, "flat: delegate to FlatLCDM"),
    Rule(Method.MATTER_CURVATURE, _open_or_closed_matter, "matter + curvature"),
    Rule(Method.EINSTEIN_DE_SITTER, _einstein_de_sitter, "Einstein-de Sitter power law"),
    Rule(Method.DARK_ENERGY_CURVATURE, _dark_energy_only, "Λ + curvature"),
)

WCDM_DISTANCE_RULES = (
    Rule(Method.MATTER_CURVATURE, _no_dark_energy, "matter + curvature"),
    Rule(Method.LAMBDA_CDM, lambda c: c.W0 == -1, "w = -1: delegate to LambdaCDM"),
)

WCDM_TIME_RULES = (
    Rule(Method.MATTER_CURVATURE, _open_or_closed_matter, "matter + curvature"),
    Rule(Method.EINSTEIN_DE_SITTER, _einstein_de_sitter, "Einstein-de Sitter power law"),
    Rule(Method.LAMBDA_CDM, lambda c: c.W0 == -1, "w = -1: delegate to LambdaCDM"),
)

WACDM_DISTANCE_RULES = (
    Rule(Method.MATTER_CURVATURE, _no_dark_energy, "matter + curvature"),
    Rule(Method.WCDM, lambda c: c.WA == 0, "wa = 0: delegate to WCDM"),
)

WACDM_TIME_RULES = (
    Rule(Method.MATTER_CURVATURE, _open_or_closed_matter, "matter + curvature"),
    Rule(Method.EINSTEIN_DE_SITTER, _einstein_de_sitter, "Einstein-de Sitter power law"),
    Rule(Method.WCDM, lambda c: c.WA == 0, "wa = 0: delegate to WCDM"),
)
