import pytest


@pytest.fixture
def rows():
    return [
        {"Id": 1, "ManagerId": None, "Name": "Иван Петров", "Position": "CEO", "Company": "УК"},
        {"Id": "2 ", "ManagerId": " 1", "Name": "Anna", "Position": "CFO", "Company": "ДК"},
        {"Id": "3", "ManagerId": "1", "Name": "Boris", "Position": "CTO", "Company": "УК, РТ"},
        {"Id": "4", "ManagerId": "3", "Name": "Clara", "Position": "Engineer", "Company": "РТ"},
        {"Id": "5", "ManagerId": "2", "Name": "Dmitry", "Position": "Accountant", "Company": None},
        {"Id": "6", "ManagerId": "99", "Name": "Eva", "Position": "Contractor", "Company": "ДК"},
    ]
