from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from typing import Annotated, Any, Optional


def _scalar_to_text(value: Any) -> Any:
    # JSON scalars are cast to text like the store's schema does; objects/arrays still fail
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


Text = Annotated[Optional[str], BeforeValidator(_scalar_to_text)]


class ProductIn(BaseModel):
    """
    Candidate product as posted by clients.
    Numeric fields are passed through untouched; only the JSON shape is parsed.
    """
    name: Text = None
    price: Any = None
    description: Text = None
    category: Text = None
    stock: Any = None
    # unknown keys are dropped


class Product(BaseModel):
    id: str = Field(alias="_id")  # store-assigned ObjectId, hex form
    name: Text = None
    price: Any = None
    description: Text = None
    category: Text = None
    stock: Any = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_json_dict(self) -> dict:
        # wire/cache shape: "_id" key, exactly the attributes the document carries (nulls included)
        return self.model_dump(by_alias=True, exclude_unset=True)
