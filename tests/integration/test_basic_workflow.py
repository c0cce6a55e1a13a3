"""Basic workflow integration tests."""

import io
import sys

import pytest

sys.path.insert(0, "src")

from typesalad import (
    SaladInt,
    SaladString,
    System,
    SystemEvent,
    TypeTag,
    generic_list,
    typed_if,
)
from typesalad.config import SystemSettings


@pytest.mark.asyncio
async def test_packages_storage_and_printing_together(tmp_path):
    """Enable packages, compute with typed values, store, persist, and print."""
    out = io.StringIO()
    system = System(settings=SystemSettings(warn_on_new_key=False), stdout=out)
    announced = []
    system.on(SystemEvent.PACKAGE_USED, announced.append)

    await system.use_builtin("SaladMath")
    await system.use_builtin("SaladLinq")
    await system.use_builtin("SaladFiles")

    total = system.math.add(SaladInt(40), SaladInt(2))
    system.store("total", total)

    evens = (
        system.linq.new_query(range(10))
        .where(lambda n: n % 2 == 0)
        .select(SaladInt)
        .to_list()
    )
    ints = generic_list(TypeTag.INT)(*evens)

    target = SaladString(str(tmp_path / "report.json"))
    await system.files.write_json(target, ints)
    report = await system.files.read_json(target)

    typed_if(
        SaladInt(system.retrieve("total")),
        SaladInt(42),
        lambda: system.print(system.concat(SaladString("total="), total.render())),
    )

    assert announced == ["SaladMath", "SaladLinq", "SaladFiles"]
    assert report.raw_value() == [0, 2, 4, 6, 8]
    assert out.getvalue() == "total=42\n"
