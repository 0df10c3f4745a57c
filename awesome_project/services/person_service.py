"""
Services printing the program's introduction.
"""

import logging
from typing import Callable

from awesome_project.domain.person import GREETING_KEY, Person
from awesome_project.utils import clock

logger = logging.getLogger(__name__)

TimestampProvider = Callable[[], str]


def introduce(person: Person, template: str) -> str:
    """
    Render a person into a sentence

    :param person: person to introduce
    :type person: Person
    :param template: sentence with a ``{person}`` placeholder
    :type template: str

    :return: the sentence
    :rtype: str
    """
    logger.debug('Introducing %s...', person.name)

    return template.format(person=person)


def greeting_word(person: Person) -> str:
    logger.debug('Greeting %s...', person.name)

    return person.greet()[GREETING_KEY]


def grow_up(person: Person) -> Person:
    """
    Print the next age of the person and return the older copy; ``person`` keeps its age.
    """
    logger.debug('%s is %d, growing up...', person.name, person.age)

    return person.increment_age()


def announce_time(now: TimestampProvider = clock.now) -> str:
    return f'Now is {now()}, year'


def run(now: TimestampProvider = clock.now) -> None:
    """
    Print the introduction, one line per step.

    :param now: timestamp provider used for the last line
    """
    me = Person(name='Rinat', age=38)

    print(introduce(me, "It's me {person}"))
    print(introduce(Person(name='Dinara', age=38), "It's me, {person} hi"))
    print(greeting_word(me))
    grow_up(me)
    print(announce_time(now))

    logger.debug('Introduction of %s done', me.name)
