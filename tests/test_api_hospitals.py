from django.urls import reverse

from hospitals.models import BloodStock
from hospitals.stock import set_stock


def test_hospital_sets_stock_twice(make_hospital, client_for):
    hospital = make_hospital()
    client = client_for(hospital.user)

    for _ in range(2):
        res = client.put(reverse("my_stock"), {"blood_group": "O+", "units": 5}, format="json")
        assert res.status_code == 200
        assert res.json()["units_available"] == 5

    assert BloodStock.objects.filter(hospital=hospital, blood_group="O+").count() == 1


def test_stock_put_validation(make_hospital, client_for):
    client = client_for(make_hospital().user)

    assert client.put(reverse("my_stock"), {"blood_group": "O+", "units": -3}, format="json").status_code == 400
    assert client.put(reverse("my_stock"), {"blood_group": "Q", "units": 3}, format="json").status_code == 400
    assert not BloodStock.objects.exists()


def test_stock_levels_listing(make_hospital, client_for):
    hospital = make_hospital()
    set_stock(hospital, "A-", 2)

    body = client_for(hospital.user).get(reverse("my_stock")).json()

    assert body["hospital"] == hospital.pk
    assert body["levels"]["A-"] == 2
    assert body["levels"]["B+"] == 0


def test_donor_cannot_edit_stock(make_donor, client_for):
    res = client_for(make_donor().user).put(reverse("my_stock"), {"blood_group": "O+", "units": 1}, format="json")
    assert res.status_code == 403


def test_directory_lists_hospitals_with_stock(make_donor, make_hospital, client_for):
    h = make_hospital(name="Alka Hospital", city="Lalitpur")
    set_stock(h, "O-", 4)
    make_hospital(name="Bharatpur Hospital", city="Bharatpur")

    body = client_for(make_donor().user).get(reverse("hospital_directory")).json()

    assert [x["name"] for x in body] == ["Alka Hospital", "Bharatpur Hospital"]
    assert body[0]["stock"][0]["blood_group"] == "O-"
    assert body[0]["stock"][0]["units_available"] == 4


def test_directory_city_filter_is_substring_and_case_insensitive(make_donor, make_hospital, client_for):
    make_hospital(name="Alka Hospital", city="Lalitpur")
    make_hospital(name="Bharatpur Hospital", city="Bharatpur")

    body = client_for(make_donor().user).get(reverse("hospital_directory"), {"city": "LALIT"}).json()

    assert [x["name"] for x in body] == ["Alka Hospital"]


def test_my_hospital(make_hospital, client_for):
    hospital = make_hospital(hospital_code="NAMS-7")
    assert client_for(hospital.user).get(reverse("my_hospital")).json()["hospital_code"] == "NAMS-7"
