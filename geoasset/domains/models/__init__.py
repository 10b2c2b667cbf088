# geoasset/domains/models/__init__.py

"""
모든 도메인의 SQLModel 모델들을 한 곳에서 임포트하여
SQLModel.metadata 가 모든 테이블을 인식하도록 보장합니다.
"""

# usr (User)
from geoasset.domains.usr.models import User

# loc (Location)
from geoasset.domains.loc.models import Location


__all__ = [
    "User",
    "Location",
]
