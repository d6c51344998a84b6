from dataclasses import dataclass
from typing import Callable, Final, Generic, TypeAlias, TypeVar

T = TypeVar("T")

Nullable: TypeAlias = T | None

_FACTORY_TOKEN: Final = object()


class InvalidArgumentError(ValueError):
    """必須の値としてNoneが渡されたときに送出される例外。"""


@dataclass(frozen=True, init=False, repr=False)
class OptionalValue(Generic[T]):
    """
    値の有無を表す不変のコンテナ。

    インスタンスは ``of`` / ``of_nullable`` / ``empty`` のいずれかで生成する。
    不在はNoneで表し、生成後に状態が変わることはない。
    ``_token`` は生成メソッド専用の内部引数で、フィールドには含まれない。
    """

    _value: T | None

    def __init__(self, value: Nullable[T], *, _token: object = None) -> None:
        if _token is not _FACTORY_TOKEN:
            raise TypeError(
                "OptionalValue cannot be constructed directly; "
                "use of(), of_nullable() or empty()"
            )
        object.__setattr__(self, "_value", value)

    @classmethod
    def of(cls, value: T) -> "OptionalValue[T]":
        if value is None:
            raise InvalidArgumentError("Value cannot be None")
        return cls(value, _token=_FACTORY_TOKEN)

    @classmethod
    def of_nullable(cls, value: Nullable[T]) -> "OptionalValue[T]":
        return cls(value, _token=_FACTORY_TOKEN)

    @classmethod
    def empty(cls) -> "OptionalValue[T]":
        return cls(None, _token=_FACTORY_TOKEN)

    def get(self) -> T | None:
        return self._value

    def is_present(self) -> bool:
        return self._value is not None

    def if_present(self, consumer: Callable[[T], object]) -> None:
        if self._value is not None:
            consumer(self._value)

    def or_else(self, other: T) -> T:
        return self._value if self._value is not None else other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """
        値があればそれを返し、なければsupplierの戻り値を返す。

        supplierは値がない場合にのみ一度だけ呼び出される。
        """
        if self._value is not None:
            return self._value
        return supplier()

    def or_else_raise(self, error_factory: Callable[[], Exception]) -> T:
        """
        値があればそれを返し、なければerror_factoryが返す例外を送出する。

        Raises:
            Exception: error_factoryが生成した例外
        """
        if self._value is None:
            raise error_factory()
        return self._value

    def __repr__(self) -> str:
        if self._value is None:
            return "OptionalValue.empty()"
        return f"OptionalValue({self._value!r})"
