# pizza_shop/repos/order_repo.py
from pizza_shop.data.models.order import OrderModel
from pizza_shop.data.storage import FileStore
from pizza_shop.repos.record_repo import RecordRepo


class OrderRepo:
    def __init__(self, store: FileStore):
        self.records = RecordRepo.for_model(store, "orders", OrderModel)

    def create_order(self, order: OrderModel) -> OrderModel:
        return self.records.save(order.id, order)

    def get_order(self, order_id: str) -> OrderModel:
        return self.records.load(order_id)
