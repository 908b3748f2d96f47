"""
Scraper options model.

One frozen snapshot is built per scrape call by merging caller overrides
over the defaults below.
"""
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; MetaScraper/1.0;)"


class ScraperOptions(BaseModel):
    """Configuration for a single scrape call."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    max_description_length: int = Field(default=200, ge=0)
    secure_images: bool = True
    timeout: int = Field(default=30000, gt=0)  # milliseconds
    user_agent: str = DEFAULT_USER_AGENT
    follow_redirects: bool = True
    validate_urls: bool = True
    extract_raw: bool = False

    def merge(
        self,
        overrides: Optional[Union["ScraperOptions", Mapping[str, Any]]] = None,
    ) -> "ScraperOptions":
        """
        Return a new snapshot with overrides applied on top of this one.

        Only keys present in overrides replace values; the merge is one level
        deep. Keys may use either the camelCase alias or the field name.

        Raises:
            pydantic.ValidationError: On unknown keys or invalid values
        """
        if overrides is None:
            return self

        if not isinstance(overrides, ScraperOptions):
            overrides = ScraperOptions.model_validate(dict(overrides))

        provided = overrides.model_dump(include=overrides.model_fields_set)
        return ScraperOptions(**{**self.model_dump(), **provided})


DEFAULT_OPTIONS = ScraperOptions()
