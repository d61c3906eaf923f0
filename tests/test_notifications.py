"""Tests for the notification inbox."""

from tests.conftest import START

from oneway.clock import FrozenClock
from oneway.notifications import NotificationCenter, NotificationType, vote_recorded_message


class TestNotificationCenter:
    def setup_method(self):
        self.clock = FrozenClock(START)
        self.center = NotificationCenter(clock=self.clock)

    def test_push(self):
        n = self.center.push(NotificationType.SYSTEM, "Welcome to 1WAY!", "Start your journey.")
        assert n.type == NotificationType.SYSTEM
        assert n.timestamp == START
        assert not n.read
        assert self.center.notifications == (n,)

    def test_push_accepts_plain_type_string(self):
        n = self.center.push("winner", "Winner!", "You won.")
        assert n.type == NotificationType.WINNER

    def test_newest_first(self):
        first = self.center.push(NotificationType.VOTE, "one", "")
        self.clock.advance(minutes=1)
        second = self.center.push(NotificationType.VOTE, "two", "")
        assert self.center.notifications == (second, first)

    def test_unread_count_and_mark_read(self):
        a = self.center.push(NotificationType.VOTE, "a", "")
        self.center.push(NotificationType.VOTE, "b", "")
        assert self.center.unread_count() == 2

        self.center.mark_read(a.id)
        assert self.center.unread_count() == 1
        assert [n.read for n in self.center.notifications] == [False, True]

    def test_mark_unknown_is_ignored(self):
        self.center.push(NotificationType.VOTE, "a", "")
        self.center.mark_read("missing")
        assert self.center.unread_count() == 1

    def test_mark_all_read(self):
        for title in ("a", "b", "c"):
            self.center.push(NotificationType.ADVANCE, title, "")
        self.center.mark_all_read()
        assert self.center.unread_count() == 0

    def test_data_is_copied(self):
        data = {"contest_id": "1"}
        n = self.center.push(NotificationType.VOTE, "a", "", data=data)
        data["contest_id"] = "2"
        assert n.data == {"contest_id": "1"}


class TestVoteRecordedMessage:
    def test_with_artist(self):
        title, message = vote_recorded_message("DJ Nova", 4)
        assert title == "Vote Recorded!"
        assert message == "Your vote for DJ Nova has been counted. 4 votes remaining today."

    def test_unknown_artist(self):
        _, message = vote_recorded_message(None, 0)
        assert message.startswith("Your vote for artist has been counted.")
