from datetime import date
from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from . import settings
from .utils import coerce_number, squash_label


class InventoryStatus(str, Enum):
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


class OrderStatus(str, Enum):
    COMPLETED = "Completed"
    PROCESSING = "Processing"
    PENDING = "Pending"


class ChartKind(str, Enum):
    BAR = "bar"
    PIE = "pie"
    LINE = "line"
    TABLE = "table"


def _canonical_status(value: Any, enum_cls: type[Enum]) -> Any:
    """Accepts 'InStock', 'in_stock', 'low stock' etc. for the enum's value."""
    if isinstance(value, str):
        for member in enum_cls:
            if squash_label(member.value) == squash_label(value):
                return member.value
    return value


class Record(BaseModel):
    """
    Base for the console's entity records. Records arrive with camelCase
    keys; populate_by_name lets snake_case work too, and enum fields are
    stored as their plain string values so they group cleanly in pandas.
    """

    model_config = ConfigDict(
        populate_by_name=True, use_enum_values=True, extra="ignore"
    )


class Product(Record):
    id: str
    name: str
    category: str = settings.UNKNOWN_KEY
    price: float = Field(default=0, ge=0, allow_inf_nan=False)
    stock: int = Field(default=0, ge=0)

    @field_validator("price", "stock", mode="before")
    @classmethod
    def _default_malformed(cls, value: Any) -> Any:
        return coerce_number(value)


class InventoryItem(Record):
    id: str
    category: str = settings.UNKNOWN_KEY
    quantity: int = Field(default=0, ge=0)
    status: InventoryStatus
    last_updated: str = Field(default="", alias="lastUpdated")

    @field_validator("quantity", mode="before")
    @classmethod
    def _default_malformed(cls, value: Any) -> Any:
        return coerce_number(value)

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        return _canonical_status(value, InventoryStatus)


class Category(Record):
    id: str
    name: str
    description: str = ""
    items: int = Field(default=0, ge=0)
    created_on: Optional[date] = Field(default=None, alias="createdOn")

    @field_validator("items", mode="before")
    @classmethod
    def _default_malformed(cls, value: Any) -> Any:
        return coerce_number(value)


class SupplierLocation(Record):
    city: str = ""
    state: str = settings.UNKNOWN_KEY
    zip_code: str = Field(default="", alias="zipCode")
    country: str = ""


class Supplier(Record):
    id: str
    name: str
    location: SupplierLocation = Field(default_factory=SupplierLocation)
    active_orders: int = Field(default=0, ge=0, alias="activeOrders")

    @field_validator("active_orders", mode="before")
    @classmethod
    def _default_malformed(cls, value: Any) -> Any:
        return coerce_number(value)


class Order(Record):
    id: str
    order_date: Optional[date] = Field(default=None, alias="date")
    status: OrderStatus
    total: float = Field(default=0, ge=0, allow_inf_nan=False)

    @field_validator("total", mode="before")
    @classmethod
    def _default_malformed(cls, value: Any) -> Any:
        return coerce_number(value)

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        return _canonical_status(value, OrderStatus)


class WarehouseLocation(Record):
    city: str = ""
    state: str = settings.UNKNOWN_KEY
    address: str = ""
    zip_code: str = Field(default="", alias="zipCode")


class WarehouseCapacity(Record):
    used: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    @field_validator("used", "total", mode="before")
    @classmethod
    def _default_malformed(cls, value: Any) -> Any:
        return coerce_number(value)

    @model_validator(mode="after")
    def _used_within_total(self) -> "WarehouseCapacity":
        if self.used > self.total:
            raise ValueError(
                f"used capacity {self.used} exceeds total capacity {self.total}"
            )
        return self


class Warehouse(Record):
    id: str
    location: WarehouseLocation = Field(default_factory=WarehouseLocation)
    manager: str = Field(default="", alias="managedBy")
    phone: str = ""
    capacity: WarehouseCapacity = Field(default_factory=WarehouseCapacity)


class Customer(Record):
    id: str
    name: str
    city: str = ""
    state: str = settings.UNKNOWN_KEY
    zipcode: str = ""


class ReportDataset(BaseModel):
    """Every collection the report view is opened with."""

    products: list[Product] = Field(default_factory=list)
    inventory: list[InventoryItem] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    suppliers: list[Supplier] = Field(default_factory=list)
    orders: list[Order] = Field(default_factory=list)
    warehouses: list[Warehouse] = Field(default_factory=list)
    customers: list[Customer] = Field(default_factory=list)


# --- Derived, chart-ready shapes ---


class CategoryBucket(BaseModel):
    name: str
    value: Union[int, float]


class RangeBucket(BaseModel):
    label: str
    min: float
    max: Optional[float] = None  # None = unbounded
    count: int = 0


class TrendPoint(BaseModel):
    period: str
    values: dict[str, float]


class ReportPanel(BaseModel):
    """
    One chart or table of a report. Bar/pie/line rows carry a 'name' key;
    bar/pie rows a single 'value', line rows one key per series.
    """

    title: str
    kind: ChartKind
    data: list[dict[str, Any]] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)


class Report(BaseModel):
    category: str
    report_type: str
    title: str
    description: str = ""
    metrics: dict[str, Any] = Field(default_factory=dict)
    panels: list[ReportPanel] = Field(default_factory=list)
    placeholder: bool = False
