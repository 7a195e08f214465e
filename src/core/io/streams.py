"""
Streams — текстовый ввод/вывод BigInteger

Ввод: один десятичный токен, ограниченный пробельными символами, читается из
текстового или байтового потока и передаётся в BigInteger.parse.
Вывод: каноническая десятичная запись без завершающих разделителей.
"""

import io
from typing import IO, Union

from src.core.domain.big_integer import BigInteger
from src.core.math.decimal_codec import InvalidFormat

Stream = Union[IO[str], IO[bytes]]


def _read_char(stream: Stream) -> str:
    chunk = stream.read(1)
    if isinstance(chunk, bytes):
        return chunk.decode("ascii", errors="replace")
    return chunk


def read_token(stream: Stream) -> str:
    """
    Чтение одного токена, ограниченного пробельными символами.

    Пробелы перед токеном пропускаются; первый пробел после токена
    поглощается. Возвращает пустую строку, если поток исчерпан.
    """
    char = _read_char(stream)
    while char and char.isspace():
        char = _read_char(stream)

    chars: list[str] = []
    while char and not char.isspace():
        chars.append(char)
        char = _read_char(stream)

    return "".join(chars)


def read_big_integer(stream: Stream) -> BigInteger:
    """
    Чтение BigInteger из потока.

    Raises:
        InvalidFormat: Если поток исчерпан или токен не является десятичным целым
    """
    token = read_token(stream)
    if not token:
        raise InvalidFormat("No decimal token available in stream")
    return BigInteger.parse(token)


def write_big_integer(stream: Stream, value: BigInteger) -> None:
    """
    Запись канонической десятичной записи в поток.

    Тип потока определяется по поведению, а не по классу: байтовые обёртки
    (например, tempfile.NamedTemporaryFile("w+b")) отклоняют str через
    TypeError и получают ASCII-байты.
    """
    text = str(value)
    if isinstance(stream, io.TextIOBase):
        stream.write(text)
        return

    try:
        stream.write(text)
    except TypeError:
        stream.write(text.encode("ascii"))
