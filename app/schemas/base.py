from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """프론트엔드 호환 스키마 기반 클래스 (camelCase 직렬화, snake_case 입력도 허용)"""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
