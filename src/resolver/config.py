"""Import resolver configuration."""

from src.shared.config import BaseToolSettings


class ResolverSettings(BaseToolSettings):
    """Settings specific to the import resolver."""

    tool_name: str = "resolve-imports"

    # Sources whose imports the module analyzer can see
    module_extensions: list[str] = [".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs"]
    # Documents mixing prose and code; imports are scanned from raw text
    document_extensions: list[str] = [".mdx"]

    vendor_dirs: list[str] = ["node_modules"]
    # Version-control metadata; never part of the sources
    ignored_dirs: list[str] = [".git", ".hg", ".svn"]

    # Treat modules with syntax errors as analyzer failures
    strict_syntax: bool = False

    class Config:
        env_prefix = "RESOLVER_"

    @property
    def source_extensions(self) -> list[str]:
        """Every recognized extension, modules first."""
        return [*self.module_extensions, *self.document_extensions]
