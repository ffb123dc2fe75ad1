from metadata.naming import (
    association_name, cat_column_names, names_equal, to_pascal_case, unbracket,
)


class TestUnbracket:
    def test_strips_quoting(self):
        assert unbracket('[OrderID]') == 'OrderID'
        assert unbracket('"order_id"') == 'order_id'
        assert unbracket('`order_id`') == 'order_id'

    def test_leaves_plain_names(self):
        assert unbracket('OrderID') == 'OrderID'
        assert unbracket('[') == '['
        assert unbracket('') == ''


class TestNamesEqual:
    def test_ignores_order_and_case(self):
        assert names_equal(['OrderID', 'ProductID'], ['[productid]', 'orderid'])

    def test_length_mismatch(self):
        assert not names_equal(['OrderID'], ['OrderID', 'ProductID'])

    def test_different_names(self):
        assert not names_equal(['AuthorId'], ['ReviewerId'])


class TestPascalCase:
    def test_snake_case(self):
        assert to_pascal_case('customer_id') == 'CustomerId'
        assert to_pascal_case('reports_to_id') == 'ReportsToId'

    def test_pascal_case_kept(self):
        assert to_pascal_case('CustomerID') == 'CustomerID'

    def test_upper_case_parts(self):
        assert to_pascal_case('CUSTOMER_ID') == 'CustomerId'


class TestAssociationName:
    def test_format(self):
        assert association_name('Order', 'Customer', ['CustomerId']) == 'AN_Customer_Order_CustomerId'

    def test_commutative(self):
        for a, b in [('Order', 'Customer'), ('Person', 'Document'), ('Employee', 'Employee')]:
            cols = ['[AuthorId]', 'reviewer_id']
            assert association_name(a, b, cols) == association_name(b, a, cols)

    def test_columns_are_unbracketed_and_joined(self):
        name = association_name('OrderDetail', 'Order', ['[OrderID]', '[ProductID]'])
        assert name == 'AN_Order_OrderDetail_OrderID_ProductID'

    def test_distinct_column_sets_differ_only_in_suffix(self):
        author = association_name('Document', 'Person', ['AuthorId'])
        reviewer = association_name('Document', 'Person', ['ReviewerId'])
        assert author != reviewer
        assert author.rsplit('_', 1)[0] == reviewer.rsplit('_', 1)[0]

    def test_cat_column_names(self):
        assert cat_column_names(['[A]', 'B']) == 'A,B'
