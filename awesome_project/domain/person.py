from pydantic import BaseModel, ConfigDict  # pylint: disable=no-name-in-module

GREETING_KEY = "Greeting"


class Person(BaseModel):
    """A person's model, compared and copied by value"""
    model_config = ConfigDict(frozen=True)

    name: str
    age: int

    def __str__(self) -> str:
        return f"{{{self.name} {self.age}}}"

    def greet(self) -> dict[str, str]:
        """
        Greeting mapping, the same for every person.

        :return: ``{"Greeting": "Hello"}``, a new dict on every call
        """
        return {GREETING_KEY: "Hello"}

    def increment_age(self) -> "Person":
        """
        Print the age this person reaches on their next birthday and return that older copy.

        The person itself is left untouched; callers rebind to the returned value to observe the change.
        """
        older = self.model_copy(update={"age": self.age + 1})
        print(older.age)
        return older
