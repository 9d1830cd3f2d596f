import pytest


@pytest.fixture
def sample_fasta():
    """Two wrapped records followed by a single-line one."""
    return (
        ">Rosalind_6404\n"
        "CCTGCGGAAGATCGGCACTAGAATAGCCAGAACCGTTTCTCTGAGGCTTCCGGCCTTCCC\n"
        "TCCCACTAATAATTCTGAGG\n"
        ">Rosalind_5959\n"
        "CCATCGGTAGCGCATCCTTAGTCCAATTAAGTCCCTATCCAGGCGCTCCGCCGAAGGTCT\n"
        "ATATCCATTTGTCAGCAGACACGC\n"
        ">Rosalind_0808\n"
        "CCACCCTCGTGGTATGGCTAGGCATTCAGGAACCGGAGAACGCTTCAGACCAGCCCGGAC\n"
    )
