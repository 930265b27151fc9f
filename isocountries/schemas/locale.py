from typing import Annotated

from pydantic import BaseModel, Field

# [official] or [official, alias]
NameList = Annotated[list[str], Field(min_length=1, max_length=2)]


class LocaleData(BaseModel):
    locale: str = Field(min_length=1)
    countries: dict[str, str | NameList]
