import collections.abc
import dataclasses
import logging
import typing

import yarl

from rapidrest.internal import request_data
from rapidrest.internal import url as url_utils
from rapidrest.rest import session as session_m

if typing.TYPE_CHECKING:
    from rapidrest import config as config_m

__all__: collections.abc.Sequence[str] = ("Debugger", "FakeRequest")

_LOGGER: typing.Final[logging.Logger] = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True, frozen=True)
class FakeRequest:
    type: str
    url: str
    arguments: tuple[collections.abc.Mapping[str, typing.Any], ...]


@dataclasses.dataclass(slots=True)
class Debugger:
    """Stand-in for the transport while ``Config.debug`` is enabled.

    Nothing is sent over the network. Each request is recorded as
    ``last_request``, logged, and resolves to an empty mapping after the
    ``after_request`` hook has fired.
    """

    config: "config_m.Config"
    log_enabled: bool = True
    last_request: FakeRequest | None = dataclasses.field(default=None, init=False)
    history: list[FakeRequest] = dataclasses.field(default_factory=list, init=False)

    @property
    def last_url(self) -> str:
        return self.last_request.url if self.last_request else ""

    async def fake_request(
        self,
        request_type: str,
        url: str,
        intent: session_m.RequestIntent,
    ) -> dict[str, typing.Any]:
        arguments = request_data.parse_request_data(request_type, intent, self.config)
        # Body-carrying verbs put the query params second.
        params = arguments[-2]

        target = yarl.URL(url_utils.sanitize_url(url, self.config.trailing_slash))
        if params:
            target = target.with_query({key: str(value) for key, value in params.items()})

        fake = FakeRequest(request_type, str(target), arguments)
        self.last_request = fake
        self.history.append(fake)

        if self.log_enabled:
            _LOGGER.info("Fake %s request to %r with %r", request_type.upper(), fake.url, arguments)

        response: dict[str, typing.Any] = {}
        self.config.after_request(response)
        return response
