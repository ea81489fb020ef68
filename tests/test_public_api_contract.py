import inspect

import assertkit


def test_public_api_symbol_list_is_explicit_and_stable() -> None:
    assert assertkit.__all__ == [
        "__version__",
        "Handle",
        "PytestHandle",
        "RecordingHandle",
        "UnitTestHandle",
        "ReportConfig",
        "ReportConfigError",
        "GuardedResult",
        "use_report_config",
        "deep_equal",
        "non_matching_sequences",
        "non_matching_mappings",
        "invoke_guarded",
        "no_error",
        "error",
        "errors_match",
        "equal",
        "slices_match",
        "maps_match",
        "within",
        "panics",
        "not_panics",
    ]


def test_assertion_signatures_take_handle_first() -> None:
    expected_parameter_order = {
        "no_error": ("tb", "error"),
        "error": ("tb", "error"),
        "errors_match": ("tb", "expected", "input"),
        "equal": ("tb", "expected", "input"),
        "slices_match": ("tb", "expected", "input"),
        "maps_match": ("tb", "expected", "input"),
        "within": ("tb", "min_value", "max_value", "input"),
        "panics": ("tb", "fn"),
        "not_panics": ("tb", "fn"),
    }

    for name, parameters in expected_parameter_order.items():
        function = getattr(assertkit, name)
        signature = inspect.signature(function)
        assert tuple(signature.parameters.keys()) == parameters
        assert "return" in function.__annotations__
        assert function.__doc__ is not None
        assert function.__doc__.strip() != ""

        for parameter in signature.parameters.values():
            assert parameter.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD


def test_assertions_return_none_on_success() -> None:
    tb = assertkit.RecordingHandle()

    assert assertkit.equal(tb, 1, 1) is None
    assert assertkit.within(tb, 1, 3, 2) is None
    assert tb.messages == []
