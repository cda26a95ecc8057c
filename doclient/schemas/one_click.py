"""1-Click application schemas."""

from pydantic import BaseModel, Field


class OneClick(BaseModel):
    """Catalog entry of a 1-Click application."""

    slug: str | None = None
    type: str | None = None


class OneClicksRoot(BaseModel):
    """Envelope of the 1-Click listing: {"1_clicks": [...]}."""

    one_clicks: list[OneClick] = Field(default_factory=list, alias="1_clicks")


class InstallKubernetesAppsRequest(BaseModel):
    """Request to install 1-Click applications onto a Kubernetes cluster."""

    slugs: list[str] = Field(default_factory=list, alias="addon_slugs")
    cluster_uuid: str

    model_config = {"populate_by_name": True}


class InstallKubernetesAppsResponse(BaseModel):
    """Response of a Kubernetes 1-Click install."""

    message: str | None = None
