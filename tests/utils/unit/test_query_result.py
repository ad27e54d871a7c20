"""
Tests for the API response envelope.
"""

from datetime import datetime

from models.basket import BasketDTO, BasketProductDTO
from models.basketItem import BasketItemDTO
from utils.query_result import query_result_to_json


def test_model_is_dumped_in_json_mode():
    basket = BasketDTO(
        id=42,
        user_id=7,
        created_at=datetime(2026, 1, 2, 3, 4, 5),
        products=[BasketProductDTO(id=1, name="Apple Juice (1000ml)", price=1.99,
                                   basket_item=BasketItemDTO(id=1, quantity=2))]
    )

    result = query_result_to_json(basket)

    assert result["status"] == "success"
    assert result["data"]["created_at"] == "2026-01-02T03:04:05"
    assert result["data"]["products"][0]["basket_item"]["quantity"] == 2


def test_plain_data_passes_through():
    assert query_result_to_json([{"id": 1}], status="ok") == {"status": "ok", "data": [{"id": 1}]}
