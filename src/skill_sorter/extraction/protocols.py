"""Strategy protocol: ExtractionStrategy.

Structural typing contract for the extraction strategies. Any class with a
``name`` and an ``extract`` method qualifies -- no inheritance required.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..documents import ProfileDocument
from ..models import CandidateSet


@runtime_checkable
class ExtractionStrategy(Protocol):
    """Pulls (name, count) candidates from one view of a profile document.

    Returning an empty ``CandidateSet`` means the strategy found nothing.
    Raising an exception is allowed -- the pipeline catches and logs it.
    """

    @property
    def name(self) -> str:
        """Unique identifier for this strategy (e.g. ``"structured"``)."""
        ...

    def extract(self, document: ProfileDocument) -> CandidateSet:
        """Extract candidates from *document*.

        Parameters
        ----------
        document:
            Read-only view of the rendered profile.

        Returns
        -------
        CandidateSet
            Candidates in document order, tagged with this strategy's name.
        """
        ...
