from pybean.container import Autowired, component, service
from tests.container.sample_app.repositories import CustomerRepository, OrderRepository


class PricingPolicy:
    pass


@component
class MetricsCollector:
    pass


@service
class OrderService:
    orders: OrderRepository = Autowired()
    customers: CustomerRepository = Autowired()
    pricing: PricingPolicy = Autowired()
    backup: OrderRepository | None = None
    label: str = "orders"


@service
class ReportingService:
    order_service: OrderService = Autowired()
    metrics: MetricsCollector = Autowired()
