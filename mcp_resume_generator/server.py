from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from .config import Settings, load_settings
from .models import ResumeData, placeholder_template
from .renderer import RenderError, ResumeRenderer
from .workspace import DEFAULT_STEM, ResumeWorkspace

LOGGER = logging.getLogger(__name__)

SERVER_NAME = "resume-generator"

# Failures reported back to the client instead of crashing the server.
REPORTED_ERRORS = (OSError, ValueError, RenderError, httpx.HTTPError)


class ResumeTools:
    """Tool implementations; each returns a markdown status message or raises ToolError."""

    def __init__(self, workspace: ResumeWorkspace, renderer: ResumeRenderer):
        self.workspace = workspace
        self.renderer = renderer

    async def create_folder(self, folder_path: str) -> str:
        try:
            target = self.workspace.create_folder(folder_path)
        except REPORTED_ERRORS as exc:
            LOGGER.warning("create_folder(%r) failed: %s", folder_path, exc)
            raise ToolError(
                f"Error creating folder: {exc}\n\n"
                "Please check that the folder path is valid and you have write permissions."
            ) from exc

        return (
            "**Folder created successfully!**\n\n"
            f"**Folder path:** {self.workspace.relative(target)}\n"
            f"**Full path:** {target.resolve()}\n\n"
            "You can now save resumes to this folder by specifying the folderPath parameter."
        )

    async def list_folders(self, path: Optional[str] = "") -> str:
        try:
            listing = self.workspace.list_folder(path)
        except REPORTED_ERRORS as exc:
            LOGGER.warning("list_folders(%r) failed: %s", path, exc)
            raise ToolError(
                f"Error listing directory: {exc}\n\n"
                "Please check that the path exists and you have read permissions."
            ) from exc

        lines = [f"**Contents of {listing.relative_path or 'root'}:**", ""]
        if listing.folders:
            lines.append("**Folders:**")
            lines.extend(f"- {folder}/" for folder in listing.folders)
            lines.append("")
        if listing.files:
            lines.append("**Resume PDFs:**")
            lines.extend(
                f"- {item.relative_path} ({item.size_kb} KB, {item.modified.date().isoformat()})"
                for item in listing.files
            )
            lines.append("")
        if listing.is_empty:
            lines.append("The directory is empty.")
            lines.append("")
        lines.append("**Tip:** Use the folderPath parameter in generate_resume to save PDFs to specific folders.")
        return "\n".join(lines)

    async def create_resume_template(self, template_number: int = 1) -> str:
        template = placeholder_template(template_number).to_payload()
        return (
            f"Resume Template (Template #{template_number})\n\n"
            "Here's a template structure you can fill in:\n\n"
            f"```json\n{json.dumps(template, indent=2)}\n```\n\n"
            "Replace all placeholder text in brackets with your actual information, "
            "then use the generate_resume tool to create your PDF."
        )

    async def generate_resume(
        self,
        resume_data: ResumeData,
        filename: Optional[str] = DEFAULT_STEM,
        folder_path: Optional[str] = None,
    ) -> str:
        try:
            self.workspace.prepare_folder(folder_path)
            pdf = await self.renderer.render(resume_data.to_payload())
            saved = self.workspace.save_resume(pdf, filename=filename, folder_path=folder_path)
        except REPORTED_ERRORS as exc:
            LOGGER.warning("generate_resume failed: %s", exc)
            raise ToolError(
                f"Error generating resume: {exc}\n\n"
                "Please check:\n"
                "- Your internet connection\n"
                "- That all required fields are filled\n"
                "- The resume data structure is correct\n"
                "- The specified folder path is valid"
            ) from exc

        folder = self.workspace.relative(saved.path.parent)
        return (
            "Resume generated successfully!\n\n"
            f"**File saved to:** {saved.relative_path}\n"
            f"**Full path:** {saved.path.resolve()}\n"
            f"**File size:** {saved.size_bytes / 1024:.2f} KB\n"
            f"**Template used:** #{resume_data.selected_template}\n"
            f"**Resume for:** {resume_data.basics.name or 'Unknown'}\n"
            f"**Saved in folder:** {'root directory' if folder == '.' else folder}\n\n"
            "The resume PDF is ready to use!"
        )


def build_server(tools: ResumeTools) -> FastMCP:
    """Register the resume tools on a fresh FastMCP instance."""
    server = FastMCP(SERVER_NAME)

    @server.tool()
    async def generate_resume(
        resumeData: ResumeData,
        filename: str = DEFAULT_STEM,
        folderPath: Optional[str] = None,
    ) -> str:
        """
        Generate a resume PDF through the LaTeX Resume API and save it under
        the generated-resumes directory. folderPath (e.g. 'job-applications/google')
        is created when missing; omit it to save to the root.
        """
        return await tools.generate_resume(resumeData, filename=filename, folder_path=folderPath)

    @server.tool()
    async def create_folder(folderPath: str) -> str:
        """Create a (nested) folder within the generated-resumes directory for organizing resumes."""
        return await tools.create_folder(folderPath)

    @server.tool()
    async def list_folders(path: str = "") -> str:
        """List folders and resume PDFs in the generated-resumes directory (root when path is empty)."""
        return await tools.list_folders(path)

    @server.tool()
    async def create_resume_template(templateNumber: int = 1) -> str:
        """Create a template resume structure with placeholder data that can be filled in."""
        return await tools.create_resume_template(templateNumber)

    return server


def create_tools(settings: Settings) -> ResumeTools:
    return ResumeTools(ResumeWorkspace(settings.output_dir), ResumeRenderer(settings))


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resume generator MCP server (stdio).")
    parser.add_argument("--output-dir", help="Directory that holds generated resumes.")
    parser.add_argument("--api-url", help="Resume rendering endpoint.")
    parser.add_argument("--timeout", type=float, help="Rendering request timeout in seconds.")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...).")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    settings = load_settings(
        output_dir=args.output_dir,
        api_url=args.api_url,
        request_timeout=args.timeout,
        log_level=args.log_level,
    )

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    server = build_server(create_tools(settings))
    LOGGER.info("Resume generator MCP server running on stdio (root=%s)", settings.output_dir.resolve())
    server.run("stdio")


if __name__ == "__main__":
    main()
