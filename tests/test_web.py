import re

import pytest

from ikon_site.web.routes import ERROR_TEXT, SUCCESS_TEXT


def csrf_from(html: str) -> str:
    m = re.search(r'name="csrf_token" value="([^"]+)"', html)
    assert m, "form has no csrf token"
    return m.group(1)


def form_data(client, path="/", page="home", **overrides):
    token = csrf_from(client.get(path).text)
    data = {
        "name": "Jo Smith",
        "email": "jo@example.com",
        "phone": "(313) 555-0199",
        "message": "I am interested in buying a rental property.",
        "serviceType": "investment",
        "page": page,
        "csrf_token": token,
    }
    data.update(overrides)
    return data


@pytest.mark.parametrize(
    "path, heading",
    [
        ("/", "Maximize Your ROI"),
        ("/consulting", "360 Consulting"),
        ("/propertymanagement", "Property Management"),
        ("/brokerageservices", "A Model Built For Agents"),
        ("/lending", "Built For Real Estate Investors"),
    ],
)
def test_pages_render(client, path, heading):
    r = client.get(path)
    assert r.status_code == 200
    assert heading in r.text


def test_form_only_on_pages_that_offer_services(client):
    assert 'data-testid="contact-form"' in client.get("/").text
    assert 'data-testid="contact-form"' in client.get("/lending").text
    assert 'data-testid="contact-form"' not in client.get("/consulting").text


def test_service_options_follow_page(client):
    home = client.get("/").text
    lending = client.get("/lending").text
    assert 'value="lending"' not in home
    assert 'value="lending"' in lending
    assert 'value="investment"' in lending


def test_submit_stores_and_flashes(client, count_inquiries):
    r = client.post("/contact", data=form_data(client), follow_redirects=False)

    assert r.status_code == 303
    assert r.headers["location"] == "/#contact"
    assert count_inquiries() == 1

    page = client.get("/").text
    assert "Message Sent" in page
    assert SUCCESS_TEXT.replace("'", "&#39;") in page
    # flash is shown once
    assert "Message Sent" not in client.get("/").text


def test_invalid_submit_shows_field_errors(client, count_inquiries):
    data = form_data(client, name="A", message="too short")

    r = client.post("/contact", data=data)

    assert r.status_code == 400
    assert "Name must be at least 2 characters" in r.text
    assert "Message must be at least 10 characters" in r.text
    # typed values are kept
    assert 'value="A"' in r.text
    assert count_inquiries() == 0


def test_service_must_be_offered_on_page(client, count_inquiries):
    r = client.post("/contact", data=form_data(client, serviceType="lending"))
    assert r.status_code == 400
    assert "Please select a valid service" in r.text

    data = form_data(client, path="/lending", page="lending", serviceType="lending")
    r = client.post("/contact", data=data, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/lending#contact"
    assert count_inquiries() == 1


def test_missing_csrf_is_rejected(client, count_inquiries):
    data = form_data(client)
    data["csrf_token"] = ""
    assert client.post("/contact", data=data).status_code == 400

    data["csrf_token"] = "forged"
    assert client.post("/contact", data=data).status_code == 400
    assert count_inquiries() == 0


def test_storage_failure_flashes_error(down_client):
    r = down_client.post("/contact", data=form_data(down_client), follow_redirects=False)

    assert r.status_code == 303
    page = down_client.get("/").text
    assert "Error" in page
    assert ERROR_TEXT in page


def test_unknown_page_falls_back_to_home(client):
    r = client.post("/contact", data=form_data(client, page="nope"), follow_redirects=False)
    assert r.headers["location"] == "/#contact"


def test_page_without_form_falls_back_to_home(client, count_inquiries):
    data = form_data(client, page="consulting")

    r = client.post("/contact", data=data, follow_redirects=False)

    assert r.status_code == 303
    assert r.headers["location"] == "/#contact"
    assert count_inquiries() == 1


def test_errors_for_page_without_form_render_on_home(client):
    r = client.post("/contact", data=form_data(client, page="consulting", name="A"))

    assert r.status_code == 400
    assert 'data-testid="contact-form"' in r.text
    assert "Name must be at least 2 characters" in r.text
    assert "Maximize Your ROI" in r.text
