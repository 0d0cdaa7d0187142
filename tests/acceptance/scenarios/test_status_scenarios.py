"""
Provides the scenario bindings for the status feature file.
"""

from pytest_bdd import scenario

from tests.acceptance.steps.status_steps import *  # noqa: F403,S2208 - Required to import all status steps.


@scenario("status.feature", "Get the service status")
def test_get_status() -> None:
    # No body required here as this method simply provides a binding to the BDD step
    pass


@scenario("status.feature", "Print the service status from the command line")
def test_status_command() -> None:
    # No body required here as this method simply provides a binding to the BDD step
    pass


@scenario("status.feature", "Accessing a non-existent endpoint returns a 404")
def test_nonexistent_route() -> None:
    # No body required here as this method simply provides a binding to the BDD step
    pass
