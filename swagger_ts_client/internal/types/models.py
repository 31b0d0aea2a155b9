from typing import Union

from pydantic import BaseModel


class CodeBlock(BaseModel):
    order: int = 0
    code: str = ""

    def __str__(self):
        return self.code.replace("\t", "    ")


class CodeFile(BaseModel):
    file_name: str

    imports: list[str] = []
    code_blocks: list["CodeBlock"] = []

    def __str__(self):
        return (
            "\n\n".join(
                filter(
                    bool,
                    [
                        ("\n".join(self.imports) if self.imports else ""),
                        (
                            "\n\n".join(
                                map(
                                    str,
                                    sorted(
                                        self.code_blocks,
                                        key=lambda x: x.order,
                                        reverse=True,
                                    ),
                                )
                            )
                        ),
                    ],
                )
            )
            + "\n"
        ).replace("\t", "    ")

    def add_import(self, line: str) -> "CodeFile":
        if line and line not in self.imports:
            self.imports.append(line)
        return self

    def add_code_block(
        self, code_block: Union["CodeBlock", str], **kwargs
    ) -> "CodeFile":
        if isinstance(code_block, str):
            code_block = CodeBlock(code=code_block, **kwargs)

        self.code_blocks.append(code_block)
        return self


class Project(BaseModel):
    name: str
    files: list[CodeFile] = []

    def add_file(self, file_name: Union["CodeFile", str], **kwargs) -> "CodeFile":
        if isinstance(file_name, str):
            file_name = CodeFile(file_name=file_name, **kwargs)

        self.files.append(file_name)
        return file_name

    def get_file(self, file_name: str) -> Union["CodeFile", None]:
        for code_file in self.files:
            if code_file.file_name == file_name:
                return code_file
        return None
