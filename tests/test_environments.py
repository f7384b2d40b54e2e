from fractions import Fraction

import pytest

from schemeprims.environments import primitives, return_env
from schemeprims.values import ArityMismatch, ContractViolation, EnvSpec


def test_scheme_report_with_five():
    assert return_env([5], EnvSpec.SCHEME_REPORT) is EnvSpec.SCHEME_REPORT


def test_null_with_rational_five():
    assert return_env([Fraction(5, 1)], EnvSpec.NULL) is EnvSpec.NULL


def test_wrong_version():
    with pytest.raises(ContractViolation) as info:
        return_env([6], EnvSpec.SCHEME_REPORT)
    assert info.value.expected == "5"
    assert info.value.got == 6


def test_inexact_version():
    with pytest.raises(ContractViolation) as info:
        return_env([5.0], EnvSpec.NULL)
    assert info.value.expected == "5"


def test_arity():
    with pytest.raises(ArityMismatch) as info:
        return_env([], EnvSpec.NULL)
    assert info.value.got == 0


def test_primitives():
    prims = primitives()
    assert prims["scheme-report-environment"]([5]) is EnvSpec.SCHEME_REPORT
    assert prims["null-environment"]([5]) is EnvSpec.NULL