import pytest

from awesome_project.domain.person import Person


@pytest.fixture
def rinat():
    return Person(name='Rinat', age=38)
