"""Payment methods registered to a wallet."""

import logging
import uuid
from dataclasses import replace

from oneway.wallet.errors import NoPaymentMethod, UnknownPaymentMethod
from oneway.wallet.models import PaymentMethod, PaymentMethodType

logger = logging.getLogger(__name__)


class PaymentMethods:
    """A user's payment methods. Exactly one is the default while any exist.

    The first method added becomes the default. Removing the default promotes
    the oldest remaining method.
    """

    def __init__(self):
        self._methods: list[PaymentMethod] = []

    @property
    def methods(self) -> tuple[PaymentMethod, ...]:
        return tuple(self._methods)

    @property
    def default(self) -> PaymentMethod | None:
        return next((m for m in self._methods if m.is_default), None)

    def add(self, type: PaymentMethodType, name: str, last4: str | None = None,
            email: str | None = None) -> PaymentMethod:
        method = PaymentMethod(
            id=uuid.uuid4().hex,
            type=PaymentMethodType(type),
            name=name,
            is_default=not self._methods,
            last4=last4,
            email=email,
        )
        self._methods.append(method)
        logger.debug("Added payment method %s (%s)", name, method.type.value)
        return method

    def get(self, method_id: str) -> PaymentMethod:
        for method in self._methods:
            if method.id == method_id:
                return method
        raise UnknownPaymentMethod(method_id)

    def remove(self, method_id: str) -> None:
        removed = self.get(method_id)
        self._methods = [m for m in self._methods if m.id != method_id]
        if removed.is_default and self._methods:
            self._methods[0] = replace(self._methods[0], is_default=True)

    def set_default(self, method_id: str) -> PaymentMethod:
        self.get(method_id)
        self._methods = [replace(m, is_default=m.id == method_id) for m in self._methods]
        return self.get(method_id)

    def resolve(self, method_id: str | None = None) -> PaymentMethod:
        """The method with the given id, or the default when no id is given.

        Raises:
            NoPaymentMethod: If no id is given and there is no default
            UnknownPaymentMethod: If the id is not registered
        """
        if method_id is not None:
            return self.get(method_id)
        method = self.default
        if method is None:
            raise NoPaymentMethod("Please add a payment method first")
        return method
