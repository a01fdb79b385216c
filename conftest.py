import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--level",
        action="store",
        default="full",
        choices=["quick", "full"],
        help="Set the testing level: 'quick' or 'full'.",
    )


# These parameter names match up with the parameter names for
# test functions (that is functions with the word test in the name
# in files with the word test in the name) detected by pytest,
# and we test such functions with all values in the below sets
# For example, a function with the parameter name first_team
# will be tested once with False and once with True.
# Notice that the key type for this dictionary is a tuple
# which allows aliasing such that multiple parameter names share the same
# test value sets.
parameter_values = {
    ("first_team",): {  # Both team conventions are cheap, always run them
        "quick": [False, True],
        "full": [False, True],
    },
    ("robots_per_team",): {
        "quick": [7],
        "full": [1, 5, 7],
    },
}


def pytest_generate_tests(metafunc):
    for param_set, cases in parameter_values.items():
        for param in param_set:
            if param in metafunc.fixturenames:
                metafunc.parametrize(param, cases[metafunc.config.getoption("level")])
