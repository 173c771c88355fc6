from tests.helpers.filter_imports import Category, Cookie, Form, Link


def test_link_identity_ignores_parameter_values_and_host_case():
    first = Link.from_url("HTTP://Example.com/items?id=1&sort=asc")
    second = Link.from_url("http://example.com/items?sort=desc&id=2")

    assert first.identity == ("link", "http://example.com/items", ("id", "sort"))
    assert first.identity == second.identity


def test_link_identity_drops_plain_fragments_but_keeps_spa_routes():
    assert Link.from_url("https://example.com/a#top").identity[1] == "https://example.com/a"
    assert Link.from_url("https://example.com/#/search").identity[1] == "https://example.com/#/search"


def test_link_identity_distinguishes_parameter_names():
    assert Link.from_url("https://example.com/items?id=1").identity != Link.from_url(
        "https://example.com/items?name=1"
    ).identity


def test_form_identity_normalizes_method_and_input_order():
    first = Form(action="https://example.com/login", method="post", inputs=("user", "pass"))
    second = Form(action="https://EXAMPLE.com/login", method="POST", inputs=("pass", "user"))
    get_form = Form(action="https://example.com/login", method="GET", inputs=("user", "pass"))

    assert first.identity == second.identity
    assert first.identity != get_form.identity


def test_cookie_identity_ignores_value_and_leading_dot():
    first = Cookie(name="sid", value="a", domain=".Example.com")
    second = Cookie(name="sid", value="b", domain="example.com", path="/")

    assert first.identity == second.identity
    assert first.identity != Cookie(name="sid", domain="example.com", path="/admin").identity


def test_cookie_from_dict_falls_back_to_page_domain():
    cookie = Cookie.from_dict({"name": "sid", "value": "1", "domain": None}, default_domain="example.com")

    assert cookie.domain == "example.com"
    assert cookie.path == "/"


def test_category_attribute_names_match_page_accessors():
    assert [category.attribute for category in Category] == ["links", "forms", "cookies"]
    assert Category("form") is Category.FORM


def test_spa_route_query_is_split_into_parameters():
    shoes = Link.from_url("https://shop.example.com/#/search?q=shoes")
    hats = Link.from_url("https://shop.example.com/#/search?q=hats")

    assert shoes.url == "https://shop.example.com/#/search"
    assert shoes.params == (("q", "shoes"),)
    assert shoes.identity == ("link", "https://shop.example.com/#/search", ("q",))
    assert shoes.identity == hats.identity
    assert shoes.identity != Link.from_url("https://shop.example.com/#/search?page=2").identity
