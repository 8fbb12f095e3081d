from dataclasses import dataclass
from typing import Dict, List, Tuple

ROLE_NAME_TAKEN = "role name already taken"
ROLE_NAME_REQUIRED = "role name is required"


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """
    필드별 검증 오류를 담는 불변 값 객체입니다.
    호출자가 이전 단계의 결과를 다음 검증(can_create/can_edit)에 명시적으로 넘깁니다.
    """
    errors: Tuple[FieldError, ...] = ()

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def error(cls, field: str, message: str) -> "ValidationResult":
        return cls((FieldError(field, message),))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def with_error(self, field: str, message: str) -> "ValidationResult":
        return ValidationResult(self.errors + (FieldError(field, message),))

    def messages(self, field: str) -> List[str]:
        return [e.message for e in self.errors if e.field == field]

    def to_dict(self) -> Dict[str, List[str]]:
        result: Dict[str, List[str]] = {}
        for e in self.errors:
            result.setdefault(e.field, []).append(e.message)
        return result
