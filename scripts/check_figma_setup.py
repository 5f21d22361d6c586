"""Check Figma integration settings without calling the API."""
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from figma_data import check_figma_setup


def main() -> bool:
    # Missing-setting warnings come from check_figma_setup's logger
    status = check_figma_setup()

    print("Figma Integration Status:")
    print(f"- File Key: {'✅ Set' if status.has_file_key else '❌ Missing'}")
    print(f"- Token: {'✅ Set' if status.has_token else '❌ Missing'}")
    print(f"- Integrated transport: {'✅ Yes' if status.transport_available else '❌ No (using REST fallback)'}")
    print(f"- API Base URL: {status.api_base_url}")

    return status.has_file_key and status.has_token


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="⚠️  %(message)s")
    sys.exit(0 if main() else 1)
