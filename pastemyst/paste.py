import typing

import yarl

from .constants import PASTE_URL


class Paste:
    def __init__(self, data: typing.Dict):
        self.data = data
        # Set the data dict's items as attributes, e.g. paste.expiresIn
        self.__dict__.update(data)

    def __repr__(self) -> str:
        return "<Paste id=%r language=%r expiresIn=%r>" % (
            self.id,
            self.data.get("language"),
            self.data.get("expiresIn"),
        )

    @property
    def url(self) -> str:
        """Link to the paste on the PasteMyst website"""
        return str(yarl.URL(PASTE_URL) / self.id)
