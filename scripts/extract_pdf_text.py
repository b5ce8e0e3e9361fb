#!/usr/bin/env python3
"""
Dump the text of a PDF statement to a .txt file.
Useful for checking how a new statement layout comes out of extraction.
"""
import argparse
import json
import sys
from pathlib import Path

# Add project to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.exceptions import TextExtractionError
from core.pdf_text import count_pdf_pages, extract_pdf_text
from services.statement_service import StatementService


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Extract text from a PDF statement")
    parser.add_argument("pdf_path", type=Path, help="PDF statement to read")
    parser.add_argument("output_path", type=Path, nargs="?", help="Output .txt path (default: next to the PDF)")
    parser.add_argument("--max-pages", type=int, default=None, help="Maximum pages to read")
    parser.add_argument("--transactions", action="store_true", help="Also print extracted transactions as JSON")
    return parser.parse_args(argv)


def main(argv=None):
    """Extract text and report what was found."""
    args = parse_args(argv)
    output_path = args.output_path or args.pdf_path.with_suffix(".txt")
    
    try:
        content = args.pdf_path.read_bytes()
        text = extract_pdf_text(content, args.max_pages)
        page_count = count_pdf_pages(content)
    except (OSError, TextExtractionError) as e:
        print(f"Error extracting PDF text: {e}")
        return 1
    
    output_path.write_text(text, encoding="utf-8")
    
    print("PDF text extracted successfully!")
    print(f"Output saved to: {output_path}")
    print(f"Total characters: {len(text)}")
    print(f"Total pages: {page_count}")
    
    if args.transactions:
        report = StatementService().process_text(text)
        print(json.dumps(report.to_response()["transactions"], indent=2))
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
