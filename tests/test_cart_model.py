from pizza_shop.data.models import CartItem, CartModel
from pizza_shop.domain.identity import canonical_item, hash_item


def pizza(*toppings, size="large"):
    return CartItem(id="cheese-pizza", size=size, add=[CartItem(id=t) for t in toppings])


class TestIdentity:
    def test_hash_is_deterministic(self):
        assert hash_item(pizza("bacon-topping")) == hash_item(pizza("bacon-topping"))

    def test_hash_has_no_padding(self):
        item_hash = hash_item(CartItem(id="cola", size="regular"))
        assert "=" not in item_hash
        assert len(item_hash) == 43

    def test_content_changes_the_hash(self):
        assert hash_item(pizza(size="large")) != hash_item(pizza(size="small"))

    def test_reordered_additions_converge_after_canonicalization(self):
        a = canonical_item(pizza("pepperoni-topping", "bacon-topping"))
        b = canonical_item(pizza("bacon-topping", "pepperoni-topping"))

        assert hash_item(a) == hash_item(b)
        assert [sub.id for sub in a.add] == ["bacon-topping", "pepperoni-topping"]

    def test_canonical_item_does_not_mutate_input(self):
        item = pizza("pepperoni-topping", "bacon-topping")
        canonical_item(item)
        assert [sub.id for sub in item.add] == ["pepperoni-topping", "bacon-topping"]


class TestCartModel:
    def test_add_item_stores_canonical_form(self):
        cart = CartModel(id="a@b.com", user_id="a@b.com")

        cart.add_item(pizza("pepperoni-topping", "bacon-topping"))

        assert [sub.id for sub in cart.items[0].add] == ["bacon-topping", "pepperoni-topping"]

    def test_remove_top_level_item(self):
        cart = CartModel(id="a@b.com", user_id="a@b.com")
        first = cart.add_item(pizza("bacon-topping"))
        cart.add_item(CartItem(id="cola", size="regular"))

        assert cart.remove_item(hash_item(first)) is True
        assert [i.id for i in cart.items] == ["cola"]

    def test_remove_duplicate_removes_only_one(self):
        cart = CartModel(id="a@b.com", user_id="a@b.com")
        cola = cart.add_item(CartItem(id="cola", size="regular"))
        cart.add_item(CartItem(id="cola", size="regular"))

        cart.remove_item(hash_item(cola))

        assert len(cart.items) == 1

    def test_remove_addition_with_composite_id(self):
        cart = CartModel(id="a@b.com", user_id="a@b.com")
        item = cart.add_item(pizza("bacon-topping", "pepperoni-topping"))
        bacon = item.add[0]

        assert cart.remove_item(f"{hash_item(item)}:{hash_item(bacon)}") is True
        assert [sub.id for sub in cart.items[0].add] == ["pepperoni-topping"]

    def test_remove_unknown_id_is_a_noop(self):
        cart = CartModel(id="a@b.com", user_id="a@b.com")
        cart.add_item(pizza("bacon-topping"))

        assert cart.remove_item("nope") is False
        assert cart.remove_item("nope:also-nope") is False
        assert cart.remove_item(":") is False
        assert len(cart.items) == 1

    def test_composite_id_with_extra_parts_matches_nothing(self):
        cart = CartModel(id="a@b.com", user_id="a@b.com")
        item = cart.add_item(pizza("bacon-topping"))
        bacon = item.add[0]

        assert cart.remove_item(f"{hash_item(item)}:{hash_item(bacon)}:extra") is False
        assert [sub.id for sub in cart.items[0].add] == ["bacon-topping"]

    def test_clear(self):
        cart = CartModel(id="a@b.com", user_id="a@b.com")
        cart.add_item(pizza())
        cart.clear()
        assert cart.items == []

    def test_record_uses_camel_case(self):
        cart = CartModel(id="a@b.com", user_id="a@b.com")
        cart.add_item(CartItem(id="cola", size="regular"))

        assert cart.to_record() == {
            "id": "a@b.com",
            "userId": "a@b.com",
            "items": [{"id": "cola", "size": "regular"}],
        }
        assert CartModel.model_validate(cart.to_record()) == cart
