# Converting typed values to and from messages.

import msgspec

import wsmessage
from wsmessage import Message


class Event(msgspec.Struct):
    name: str
    count: int


wsmessage.logs.init(debug_level=2)

msg = Message.text_from_json(Event('ping', 1))
print(f'{msg=}')
print(f'{msg.json(Event)=}')

try:
    wsmessage.Ping(b'{}').json(Event)
except wsmessage.WsMessageError as exc:
    print(f'{exc=}')
