"""Shared pytest fixtures for lucidity tests."""

import typing
from datetime import datetime

import pydantic
import pytest

import lucidity
from lucidity import CascadeMode, Validator


class User(pydantic.BaseModel):
    """Test model representing a user signing up."""

    email: str = "teste@gmail.com"
    password: str = "Teste@1234"
    age: int = 18
    phone: str = "(11) 99999-9999"
    description: str | None = None
    cpf: str | None = None
    document: str | None = None


class Credentials(pydantic.BaseModel):
    """Test model with two fields that must agree."""

    email: str
    password: str
    confirm_password: str


class Address(pydantic.BaseModel):
    """Test model representing a postal address."""

    street: str = "Rua A"
    postcode: str = "01001-000"


class Customer(pydantic.BaseModel):
    """Test model with a nested address."""

    name: str = "Alice"
    address: Address | None = pydantic.Field(default_factory=Address)


class Event(pydantic.BaseModel):
    """Test model with datetime fields."""

    title: str = "Launch"
    start: datetime | str | None = None


class UserValidator(Validator[User]):
    """Validator mirroring a sign-up form."""

    def __init__(self) -> None:
        super().__init__()
        self.rule_for(lambda u: u.email, key="email") \
            .not_empty(message="Cannot be empty") \
            .valid_email(message="Invalid email address")
        self.rule_for(lambda u: u.password, key="password") \
            .not_empty(message="Cannot be empty") \
            .min_length(8, message="Must be at least 8 characters long") \
            .must_have_lowercase(message="Must contain at least one lowercase letter") \
            .must_have_uppercase(message="Must contain at least one uppercase letter") \
            .must_have_number(message="Must contain at least one numeric digit") \
            .must_have_special_character(message="Must contain at least one special character")
        self.rule_for(lambda u: u.age, key="age").min(18, message="Minimum age is 18 years")
        self.rule_for(lambda u: u.phone, key="phone").valid_phone_br(
            message="Phone invalid format"
        )


class CredentialsValidator(Validator[Credentials]):
    def __init__(self) -> None:
        super().__init__()
        self.rule_for(lambda c: c.email, key="email").valid_email()
        self.rule_for(lambda c: c.password, key="password") \
            .not_empty() \
            .must_have_uppercase()
        self.rule_for(lambda c: c.confirm_password, key="confirmPassword") \
            .equal_to(lambda c: c.password) \
            .must_have_special_character()


class AddressValidator(Validator[Address]):
    def __init__(self) -> None:
        super().__init__()
        self.rule_for(lambda a: a.street, key="street").not_empty()
        self.rule_for(lambda a: a.postcode, key="postcode").not_empty().valid_cep()


class CustomerValidator(Validator[Customer]):
    def __init__(self) -> None:
        super().__init__()
        self.rule_for(lambda c: c.name, key="name").not_empty()
        self.rule_for(lambda c: c.address, key="address").set_validator(AddressValidator())


@pytest.fixture(autouse=True)
def reset_settings() -> typing.Iterator[None]:
    """Restore the process-wide settings around every test."""
    lucidity.reset()
    yield
    lucidity.reset()


@pytest.fixture
def user() -> User:
    """Fixture providing a user that passes UserValidator."""
    return User()


@pytest.fixture
def user_validator() -> UserValidator:
    return UserValidator()


@pytest.fixture
def customer_validator() -> CustomerValidator:
    return CustomerValidator()


@pytest.fixture
def validator() -> Validator[typing.Any]:
    """Fixture providing an empty validator for ad-hoc rules."""
    return Validator()


@pytest.fixture
def stop_mode() -> CascadeMode:
    return CascadeMode.STOP_ON_FIRST_FAILURE
