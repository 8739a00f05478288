"""Tests for product_relay/client/serialization.py"""

import json

import pytest

from product_relay.client.serialization import (
    decode_batch,
    decode_products,
    encode_batch,
    product_from_dict,
)
from product_relay.common.errors import DecodeError
from product_relay.models import Product, ProductBatch


class TestEncodeBatch:
    def test_document_key_order(self, sample_batch):
        document = json.loads(encode_batch(sample_batch))
        assert list(document) == ["batchId", "products", "timestamp"]
        assert list(document["products"][0]) == ["id", "name", "price", "category", "inStock"]

    def test_document_values(self, sample_batch):
        document = json.loads(encode_batch(sample_batch))
        assert document == {
            "batchId": "B001",
            "products": [
                {"id": "P003", "name": "Keyboard", "price": 75.0, "category": "Electronics", "inStock": True}
            ],
            "timestamp": 1678886400000,
        }

    def test_product_order_preserved(self, sample_products):
        document = json.loads(encode_batch(ProductBatch("B", sample_products, 1)))
        assert [p["id"] for p in document["products"]] == ["P005", "P006"]

    def test_empty_batch(self):
        document = json.loads(encode_batch(ProductBatch("B", [], 5)))
        assert document["products"] == []


class TestRoundTrip:
    def test_decoded_batch_equals_encoded_batch(self, sample_products):
        batch = ProductBatch("BATCH_XYZ", sample_products, 1700000000123)
        assert decode_batch(encode_batch(batch)) == batch

    def test_non_ascii_names(self):
        batch = ProductBatch("B", [Product("P1", "Кафе", 3.5, "Напитки", True)], 1)
        assert decode_batch(encode_batch(batch)) == batch

    def test_decoding_is_key_order_independent(self, sample_batch):
        reordered = '{"timestamp": 1678886400000, "products": [{"inStock": true, "category": ' \
                    '"Electronics", "price": 75.0, "name": "Keyboard", "id": "P003"}], "batchId": "B001"}'
        assert decode_batch(reordered) == sample_batch


class TestDecodeProducts:
    def test_decodes_array(self, source_body):
        products = decode_products(source_body)
        assert len(products) == 2
        assert products[0] == Product("P001", "Laptop", 1200.0, "Electronics", True)
        assert products[1].name == "Mouse"

    def test_empty_array(self):
        assert decode_products("[]") == []

    def test_integer_price_accepted(self):
        assert decode_products('[{"id": "P1", "price": 12}]')[0].price == 12.0

    def test_extra_fields_ignored(self):
        products = decode_products('[{"id": "P1", "name": "Pen", "color": "blue"}]')
        assert products == [Product("P1", "Pen")]

    def test_missing_optional_fields_default(self):
        product = decode_products('[{"id": "P1"}]')[0]
        assert product == Product("P1", "", 0.0, "", False)

    def test_invalid_json(self):
        with pytest.raises(DecodeError, match="not valid JSON"):
            decode_products("<html>oops</html>")

    def test_object_instead_of_array(self):
        with pytest.raises(DecodeError, match="JSON array"):
            decode_products('{"id": "P1"}')

    def test_non_object_element(self):
        with pytest.raises(DecodeError, match="product object"):
            decode_products('["P1"]')

    def test_string_price_rejected(self):
        with pytest.raises(DecodeError, match="price"):
            decode_products('[{"id": "P1", "price": "cheap"}]')

    def test_boolean_price_rejected(self):
        with pytest.raises(DecodeError, match="price"):
            decode_products('[{"id": "P1", "price": true}]')

    def test_negative_price_rejected(self):
        with pytest.raises(DecodeError, match="non-negative"):
            decode_products('[{"id": "P1", "price": -3}]')

    def test_missing_id_rejected(self):
        with pytest.raises(DecodeError, match="'id'"):
            decode_products('[{"name": "Pen"}]')

    def test_numeric_id_rejected(self):
        with pytest.raises(DecodeError, match="'id'"):
            decode_products('[{"id": 7}]')

    def test_non_bool_in_stock_rejected(self):
        with pytest.raises(DecodeError, match="inStock"):
            decode_products('[{"id": "P1", "inStock": "yes"}]')

    def test_non_string_name_rejected(self):
        with pytest.raises(DecodeError, match="name"):
            product_from_dict({"id": "P1", "name": 42})


class TestDecodeBatch:
    def test_not_an_object(self):
        with pytest.raises(DecodeError, match="batch object"):
            decode_batch("[]")

    def test_missing_batch_id(self):
        with pytest.raises(DecodeError, match="batchId"):
            decode_batch('{"products": [], "timestamp": 1}')

    def test_float_timestamp_rejected(self):
        with pytest.raises(DecodeError, match="timestamp"):
            decode_batch('{"batchId": "B", "products": [], "timestamp": 1.5}')

    def test_products_must_be_array(self):
        with pytest.raises(DecodeError, match="products"):
            decode_batch('{"batchId": "B", "products": {}, "timestamp": 1}')


class TestMalformedNumbersAndNesting:
    def test_huge_integer_price_rejected(self):
        with pytest.raises(DecodeError, match="out of range"):
            decode_products('[{"id": "P1", "price": 1' + '0' * 400 + '}]')

    def test_overflowing_float_price_rejected(self):
        with pytest.raises(DecodeError, match="finite"):
            decode_products('[{"id": "P1", "price": 1e400}]')

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_rejected(self, token):
        with pytest.raises(DecodeError, match="not valid JSON"):
            decode_products('[{"id": "P1", "price": %s}]' % token)

    def test_deeply_nested_document_rejected(self):
        with pytest.raises(DecodeError, match="not valid JSON"):
            decode_products('[' * 100000 + ']' * 100000)

    def test_encoded_batch_is_strict_json(self, sample_batch):
        document = encode_batch(sample_batch)
        assert "NaN" not in document
        assert json.loads(document, parse_constant=lambda token: pytest.fail(token))
