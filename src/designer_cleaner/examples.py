"""
Example designer/companion pair.

A small XPO-style persistent class where the developer moved ``Name`` (with
validation) into the hand-authored file, after which the designer
regenerated both the property and its backing field.

Used by the tests and as a quick way to try the tool:

    >>> from designer_cleaner.examples import write_example_pair
    >>> write_example_pair("/tmp/demo")
"""

from pathlib import Path
from typing import Tuple, Union


EXAMPLE_DESIGNER = """\
using System;
using DevExpress.Xpo;

namespace Demo.Module.BusinessObjects
{
    [Persistent("Customer")]
    public partial class Customer : XPObject
    {
        private string fName;
        // Regenerated by the designer
        public string Name
        {
            get { return fName; }
            set { SetPropertyValue<string>(nameof(Name), ref fName, value); }
        }

        private int fAge;
        public int Age
        {
            get { return fAge; }
            set { SetPropertyValue<int>(nameof(Age), ref fAge, value); }
        }

        public Customer(Session session) : base(session) { }
    }
}
"""


EXAMPLE_COMPANION = """\
using System;
using DevExpress.Xpo;

namespace Demo.Module.BusinessObjects
{
    public partial class Customer
    {
        private string name;
        public string Name
        {
            get { return name; }
            set
            {
                if (string.IsNullOrWhiteSpace(value))
                    throw new ArgumentException("Name is required");
                SetPropertyValue<string>(nameof(Name), ref name, value);
            }
        }
    }
}
"""


EXAMPLE_CLEANED_DESIGNER = """\
using System;
using DevExpress.Xpo;

namespace Demo.Module.BusinessObjects
{
    [Persistent("Customer")]
    public partial class Customer : XPObject
    {
        private int fAge;
        public int Age
        {
            get { return fAge; }
            set { SetPropertyValue<int>(nameof(Age), ref fAge, value); }
        }

        public Customer(Session session) : base(session) { }
    }
}
"""


def write_example_pair(
    directory: Union[str, Path], class_name: str = "Customer"
) -> Tuple[Path, Path]:
    """
    Write the example pair into ``directory``.

    Returns:
        (designer_path, companion_path)
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    designer = directory / f"{class_name}.Designer.cs"
    companion = directory / f"{class_name}.cs"
    designer.write_text(EXAMPLE_DESIGNER.replace("Customer", class_name), encoding="utf-8")
    companion.write_text(EXAMPLE_COMPANION.replace("Customer", class_name), encoding="utf-8")
    return designer, companion
