from collections.abc import Iterator

import pytest

import filecounter.ui.cli.state as cli_state


@pytest.fixture(autouse=True)
def _isolated_cli_state() -> Iterator[None]:
    token = cli_state._STATE_VAR.set(None)
    yield
    cli_state._STATE_VAR.reset(token)
