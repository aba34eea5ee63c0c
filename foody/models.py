from pydantic import BaseModel, ConfigDict, Field

from foody.core.config import ANSI_LIGHT_GREEN, ANSI_NO_COLOR


class Recipe(BaseModel):
    """Normalized recipe record shared by every source."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str = ""
    location: str = ""
    image_url: str = ""
    time: str = ""
    # 0 means the source did not supply a usable value.
    num_ingredients: int = Field(default=0, ge=0)
    servings: int = Field(default=0, ge=0)

    def summary(self, color: str = ANSI_LIGHT_GREEN, reset: str = ANSI_NO_COLOR) -> str:
        """Multi-line listing entry; empty and zero fields are omitted."""
        lines = [f"{color}{self.name}{reset}"]
        if self.image_url:
            lines.append(f"picture → {self.image_url}")
        if self.url:
            lines.append(f"url → {self.url}")
        if self.time:
            lines.append(f"time → {self.time}")
        if self.num_ingredients > 0:
            lines.append(f"# ingredients → {self.num_ingredients}")
        if self.servings > 0:
            lines.append(f"# yield → {self.servings}")
        return "\n".join(lines) + "\n"
