# mdapi/api/markdown.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from mdapi.config import Settings, get_settings
from mdapi.core import (
    CatalogBuilder,
    ContentReader,
    DirectoryAccessError,
    FileReadError,
    FileWriteError,
    InvalidFileNameError,
    MarkdownError,
    MarkdownFileExistsError,
    MarkdownFileNotFoundError,
    MarkdownUploader,
)
from mdapi.models.markdown import (
    MarkdownFileOut,
    UploadedFileOut,
    UploadMarkdownRequest,
)

router = APIRouter(prefix="/markdown", tags=["markdown"])

_STATUS_BY_ERROR = {
    DirectoryAccessError: 500,
    MarkdownFileNotFoundError: 404,
    FileReadError: 500,
    InvalidFileNameError: 400,
    MarkdownFileExistsError: 409,
    FileWriteError: 500,
}


def _to_http(exc: MarkdownError) -> HTTPException:
    return HTTPException(
        status_code=_STATUS_BY_ERROR.get(type(exc), 500),
        detail=exc.message,
    )


def get_catalog(settings: Settings = Depends(get_settings)) -> CatalogBuilder:
    return CatalogBuilder(settings.markdown_dir)


def get_reader(settings: Settings = Depends(get_settings)) -> ContentReader:
    return ContentReader(settings.markdown_dir)


def get_uploader(settings: Settings = Depends(get_settings)) -> MarkdownUploader:
    return MarkdownUploader(settings.markdown_dir)


@router.get(
    "/",
    response_model=List[MarkdownFileOut],
    operation_id="getAllMarkdownFiles",
)
def get_all_markdown_files(
    catalog: CatalogBuilder = Depends(get_catalog),
) -> List[MarkdownFileOut]:
    """
    Return every markdown file in the directory with its derived title.
    """
    try:
        documents = catalog.list_documents()
    except MarkdownError as exc:
        raise _to_http(exc)

    return [
        MarkdownFileOut(id=doc.id, title=doc.title, file_name=doc.file_name)
        for doc in documents
    ]


@router.get(
    "/{file_name}",
    response_class=Response,
    operation_id="getMarkdownFile",
    responses={200: {"content": {"text/markdown": {}}}},
)
def get_markdown_file(
    file_name: str,
    reader: ContentReader = Depends(get_reader),
) -> Response:
    """
    Return the raw content of <file_name>.md.
    """
    try:
        content = reader.read(file_name)
    except MarkdownError as exc:
        raise _to_http(exc)

    return Response(content=content, media_type="text/markdown; charset=utf-8")


@router.post(
    "/",
    response_model=UploadedFileOut,
    status_code=status.HTTP_201_CREATED,
    operation_id="uploadMarkdownFile",
)
def upload_markdown_file(
    request: UploadMarkdownRequest,
    uploader: MarkdownUploader = Depends(get_uploader),
) -> UploadedFileOut:
    """
    Store a new markdown file and return its metadata.
    """
    try:
        stored = uploader.upload(request.file.filename, request.file.content)
    except MarkdownError as exc:
        raise _to_http(exc)

    return UploadedFileOut(
        filename=stored.filename,
        mimetype=stored.mimetype,
        encoding=stored.encoding,
    )
