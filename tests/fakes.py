"""
Test doubles shared across test modules.
"""


class FakeWebSocket:
    """Records JSON messages; raises once `fail` is set."""

    def __init__(self):
        self.accepted = False
        self.fail = False
        self.sent = []

    async def accept(self):
        self.accepted = True

    async def send_json(self, data):
        if self.fail:
            raise RuntimeError("connection closed")
        self.sent.append(data)
