from enum import Enum


class DeliveryMode(str, Enum):
    """
    How the customer receives the order.

    Meeting point pickup is always free; home delivery carries the configured
    base cost unless the subtotal reaches the free shipping threshold.
    """

    MEETING_POINT = "meeting_point"
    HOME_DELIVERY = "home_delivery"

    @property
    def order_note(self) -> str:
        """
        Note attached to the submitted order.

        Examples:
            >>> DeliveryMode.HOME_DELIVERY.order_note
            'Home delivery'
        """
        match self:
            case DeliveryMode.HOME_DELIVERY:
                return "Home delivery"
            case DeliveryMode.MEETING_POINT:
                return "Meeting point pickup"
