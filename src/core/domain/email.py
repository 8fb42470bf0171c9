"""Buzones, carpetas y cartas del módulo de email."""

from __future__ import annotations

from pydantic import Field

from core.domain.pagination import WireModel


class EmailBox(WireModel):
    id: int
    email: str | None = Field(default=None, description="Dirección del buzón conectado.")
    name: str | None = None
    active: bool = True


class EmailFolder(WireModel):
    id: int
    name: str | None = None
    box_id: int | None = Field(default=None, description="Buzón al que pertenece la carpeta.")
    unread: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)


class Letter(WireModel):
    id: int
    folder_id: int | None = None
    subject: str | None = None
    sender: str | None = Field(default=None, alias="from")
    to: list[str] = Field(default_factory=list)
    cc: list[str] = Field(default_factory=list)
    body: str | None = None
    date: int | None = Field(default=None, description="Fecha de envío/recepción (epoch).")
    seen: bool = False


class EmailBoxConnect(WireModel):
    """Credentials and server settings used to attach a mailbox."""

    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
    imap_host: str | None = None
    imap_port: int | None = Field(default=None, ge=1, le=65535)
    smtp_host: str | None = None
    smtp_port: int | None = Field(default=None, ge=1, le=65535)


class LetterCreate(WireModel):
    to: list[str] = Field(..., min_length=1)
    cc: list[str] = Field(default_factory=list)
    bcc: list[str] = Field(default_factory=list)
    subject: str = ""
    body: str = ""
    file_ids: list[int] = Field(default_factory=list)
