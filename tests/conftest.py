import pytest

from dualgraph import create_graph


@pytest.fixture(params=["matrix", "list"])
def make_graph(request):
    """Build an empty graph of the parametrised representation."""

    def _make(directed=False, weighted=False):
        return create_graph(request.param, directed=directed, weighted=weighted)

    return _make
