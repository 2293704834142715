# mdapi/models/markdown.py

from pydantic import BaseModel, Field


class MarkdownFileOut(BaseModel):
    id: int
    title: str
    file_name: str = Field(alias="fileName")

    class Config:
        from_attributes = True
        populate_by_name = True


class UploadFileInput(BaseModel):
    filename: str
    content: str


class UploadMarkdownRequest(BaseModel):
    file: UploadFileInput


class UploadedFileOut(BaseModel):
    filename: str
    mimetype: str
    encoding: str
