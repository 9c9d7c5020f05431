from pydantic import BaseModel, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class SourceLinkRules(BaseModel):
    url_template: str
    title: str = Field(min_length=1)

    @field_validator("url_template")
    @classmethod
    def template_has_page_identifier(cls, v: str) -> str:
        if "{page_identifier}" not in v:
            raise ValueError("url_template must contain {page_identifier}")
        try:
            v.format(page_identifier="")
        except (IndexError, KeyError, ValueError) as e:
            raise ValueError(f"url_template has unknown fields: {e}") from e
        return v

class LinksRules(BaseModel):
    source_link: SourceLinkRules

class Rules(BaseModel):
    project: ProjectRules
    links: LinksRules
