"""Sync a Figma design system file (READ-ONLY)."""
import asyncio
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from figma_data import FigmaError, sync_design_system, validate_file_key


async def main(file_key: str) -> bool:
    print(f"🔄 Starting design system sync for {file_key}\n")

    try:
        snapshot = await sync_design_system(file_key)
    except FigmaError as e:
        print(f"❌ Design system sync failed: {e}")
        return False

    print("✅ Design system sync completed!")
    print(f"- Components: {len(snapshot.components)}")
    for component in snapshot.components:
        print(f"   - {component.name} ({component.key})")
    print(f"- Variable Groups: {len(snapshot.variable_groups)}")
    for group in snapshot.variable_groups:
        print(f"   - {group.name} ({len(group.variables)} variables)")
    print(f"- Styles: {len(snapshot.styles)}")
    for style in snapshot.styles:
        print(f"   - {style.name} ({style.style_type})")
    print(f"- Component Images: {len(snapshot.images)}")
    return True


if __name__ == "__main__":
    if len(sys.argv) < 2 or not validate_file_key(sys.argv[1]):
        print("Usage: python scripts/sync_design_system.py <figma-file-key>")
        print("Example: python scripts/sync_design_system.py fRi3HAgxLDuHW4MJQPf5r3")
        sys.exit(1)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    success = asyncio.run(main(sys.argv[1]))
    sys.exit(0 if success else 1)
