import pytest

NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code=200, payload=NO_JSON, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ""

    def json(self):
        if self._payload is NO_JSON:
            raise ValueError("No JSON object could be decoded")
        return self._payload


@pytest.fixture
def raw_guide():
    def make(dice=None, html="<p>Stack Fire early.</p><p>Merge at wave 5.</p>", **extra):
        g = {
            "id": 1,
            "type": "PvP",
            "title": "Fire Crit",
            "diceList": dice if dice is not None else [[0, 13, 14, 5, -1]],
            "guide": html,
        }
        g.update(extra)
        return g
    return make
