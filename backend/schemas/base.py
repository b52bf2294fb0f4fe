from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Base configuration: ORM compatibility and camelCase JSON field names
class ORMBase(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# Reject explicit nulls for columns that cannot be NULL.
# Omitted fields keep their None default and are skipped on update.
def reject_null(value):
    if value is None:
        raise ValueError("may not be null")
    return value


class SuccessResponse(BaseModel):
    success: bool = True
