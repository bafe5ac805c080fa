from app.utils.exceptions import InvalidInputException

# 標準 UUID 字串長度，只檢查長度不檢查內容
ID_LENGTH = 36


def validate_id(value: str, label: str) -> str:
    """
    validate_id("275c1138-...", "course") -> 原值
    長度不對就丟 InvalidInputException("Provided course id is invalid: ...")
    """
    if len(value) != ID_LENGTH:
        raise InvalidInputException(f"Provided {label} id is invalid: {value}")
    return value
