"""
Mapping between persistent entities and API transfer models.

Each mapper copies fields explicitly.  The optional ``url_resolver``
turns a route name plus path parameters into an absolute URL; the API
layer builds it from ``Request.url_for`` so transfer models carry a
self link.  Without a resolver ``url`` stays ``None``.
"""

from typing import Callable, Optional

from ..data.entities import Camp, Speaker
from ..schemas.camp import CampCreate, CampRead
from ..schemas.speaker import SpeakerModel, SpeakerRead

UrlResolver = Callable[..., str]

CAMP_ROUTE = "get_camp"
SPEAKER_ROUTE = "get_speaker"

SPEAKER_FIELDS = tuple(SpeakerModel.model_fields)


class SpeakerMapper:
    def __init__(self, url_resolver: Optional[UrlResolver] = None):
        self._url_resolver = url_resolver

    def to_transfer_model(self, speaker: Speaker) -> SpeakerRead:
        moniker = speaker.camp.moniker if speaker.camp is not None else None
        url = None
        if self._url_resolver is not None and moniker is not None:
            url = self._url_resolver(SPEAKER_ROUTE, moniker=moniker, speaker_id=speaker.id)
        return SpeakerRead(
            id=speaker.id,
            url=url,
            camp_moniker=moniker,
            **{name: getattr(speaker, name) for name in SPEAKER_FIELDS},
        )

    def to_entity(self, model: SpeakerModel) -> Speaker:
        return Speaker(**{name: getattr(model, name) for name in SPEAKER_FIELDS})

    def apply_model_to_entity(self, model: SpeakerModel, speaker: Speaker) -> Speaker:
        """Overwrite every profile field of ``speaker`` with the model's value."""
        for name in SPEAKER_FIELDS:
            setattr(speaker, name, getattr(model, name))
        return speaker


class CampMapper:
    def __init__(
        self,
        url_resolver: Optional[UrlResolver] = None,
        speaker_mapper: Optional[SpeakerMapper] = None,
    ):
        self._url_resolver = url_resolver
        self._speaker_mapper = speaker_mapper or SpeakerMapper(url_resolver)

    def to_transfer_model(self, camp: Camp) -> CampRead:
        url = None
        if self._url_resolver is not None:
            url = self._url_resolver(CAMP_ROUTE, camp_id=camp.id)
        speakers = None
        if camp.speakers is not None:
            speakers = [self._speaker_mapper.to_transfer_model(s) for s in camp.speakers]
        return CampRead(
            id=camp.id,
            url=url,
            moniker=camp.moniker,
            name=camp.name,
            description=camp.description,
            location=camp.location,
            length=camp.length,
            event_date=camp.event_date,
            speakers=speakers,
        )

    def to_entity(self, model: CampCreate) -> Camp:
        return Camp(
            moniker=model.moniker,
            name=model.name,
            description=model.description,
            location=model.location,
            length=model.length,
            event_date=model.event_date,
        )
