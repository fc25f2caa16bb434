import logging
from typing import List

logger = logging.getLogger(__name__)


class Observer:

    def update(self):
        raise NotImplementedError


class Observee:

    def register_listener(self, observer: Observer):
        raise NotImplementedError

    def unregister_listener(self, observer: Observer):
        raise NotImplementedError


class Database(Observee):

    def __init__(self):
        self.observers: List[Observer] = []

    def register_listener(self, observer: Observer):
        if observer not in self.observers:
            self.observers.append(observer)

    def unregister_listener(self, observer: Observer):
        self.observers = [registered for registered in self.observers if registered is not observer]

    def update_data(self):
        # some update to database...
        logger.debug("Database updated, notifying %d listener(s)", len(self.observers))
        for observer in list(self.observers):
            observer.update()


class InterestedParty(Observer):

    def __init__(self):
        self.notifications: List[str] = []

    def update(self):
        self.notifications.append("Received notification")

    @property
    def notification_count(self) -> int:
        return len(self.notifications)


if __name__ == '__main__':
    db = Database()
    interested_party = InterestedParty()

    db.register_listener(interested_party)

    db.update_data()

    for notification in interested_party.notifications:
        print(notification)
